class ApiError(Exception):
    status = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Internal(ApiError):
    pass


class Unauthenticated(ApiError):
    status = 401
    message = 'Unauthorized'


class NotFound(ApiError):
    status = 404
    message = 'Not found'


class InvalidArgument(ApiError):
    status = 400
    message = 'Invalid input'
