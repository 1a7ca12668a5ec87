"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ChannelSendError(AdapterError):
    """Raised when an event cannot be written to a live channel.

    The channel is either closed or its buffer is full because the client
    stopped reading.
    """

    pass
