from ratepoll.infra.notify.logger_notifier import LoggerStatusNotifier

__all__ = ["LoggerStatusNotifier"]
