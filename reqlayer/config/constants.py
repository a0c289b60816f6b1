"""
网络层常量定义
"""


class HttpDefaults:
    """HTTP 客户端默认配置"""

    BASE_URL = ""
    TIMEOUT_SECONDS = 10.0  # 与前端 GlobalConfig.Http.Timeout 默认值一致
    CONTENT_TYPE = "application/x-www-form-urlencoded"
    JSON_CONTENT_TYPE = "application/json"  # 数组、数字等非字典请求体

    # 连接池
    MAX_CONNECTIONS = 100
    KEEPALIVE_CONNECTIONS = 20


# 业务成功码
SUCCESS_CODE = 200
