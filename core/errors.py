# core/errors.py


class ShoeAlertError(Exception):
    """Base class for every condition that aborts a run."""


class ConfigError(ShoeAlertError):
    pass


class FetchError(ShoeAlertError):
    pass


class ReportRenderError(ShoeAlertError):
    pass


class EmailSendError(ShoeAlertError):
    pass
