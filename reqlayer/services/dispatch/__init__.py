from reqlayer.services.dispatch.dispatcher import RequestDispatcher, build_request_kwargs

__all__ = ["RequestDispatcher", "build_request_kwargs"]
