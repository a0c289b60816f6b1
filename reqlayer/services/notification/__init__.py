from reqlayer.services.notification.notifier import LoggingNotifier, Notifier

__all__ = ["Notifier", "LoggingNotifier"]
