class ConfigurationError(ValueError):
    """Raised when a wizard configuration cannot produce a valid schedule.

    The message names the violated constraint so it can be shown to the
    admin unchanged (e.g. "Group stage requires at least 4 clubs").
    """
