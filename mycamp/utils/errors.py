from fastapi import Request, status
from fastapi.responses import JSONResponse


class MyCampError(Exception):
    """Base error for booking and inventory operations."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(MyCampError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(MyCampError):
    status_code = status.HTTP_409_CONFLICT


class InvalidReservationError(MyCampError):
    status_code = status.HTTP_400_BAD_REQUEST


class ReservationOverlapError(ConflictError, InvalidReservationError):
    """The user already holds a reservation on the campsite for those dates."""

    status_code = status.HTTP_409_CONFLICT


class InvalidOperationError(MyCampError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidAttributeError(InvalidOperationError):
    pass


class InvalidEquipmentError(InvalidOperationError):
    pass


class DataConsistencyError(MyCampError):
    """A statement that had to change rows changed none."""

    status_code = status.HTTP_400_BAD_REQUEST


async def mycamp_error_handler(_: Request, exc: MyCampError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
