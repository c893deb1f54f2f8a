"""
Errors that end a request with a JSON error message.

Each error carries the HTTP status and the message that is sent to the client as {"message": ...}.
"""


class LfsError(Exception):
    status_code = 500
    message = "Internal server error"

    #: send the message body even when answering a HEAD request
    send_body_on_head = False

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class WrongHost(LfsError):
    """The request carries no host, so no absolute links can be generated"""

    status_code = 400
    message = "Wrong host"
    send_body_on_head = True


class WrongPath(LfsError):
    status_code = 404
    message = "Wrong path"


class ObjectNotFound(LfsError):
    """The object id is valid, but the object cannot be read from the store (missing or otherwise unreadable)"""

    status_code = 404
    message = "Object not found"


class NotImplementedByServer(LfsError):
    """Anything except GET or HEAD, e.g. uploads or the batch API"""

    status_code = 501
    message = "Not implemented"
    send_body_on_head = True
