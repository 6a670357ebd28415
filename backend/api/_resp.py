# api/_resp.py
from fastapi import HTTPException, Request

from core.exceptions import AppError, InvalidInputError, InvalidModeError
from services.bootstrap import Services


def ok(data: dict | list | str | int | float | None = None, **extras):
    payload = {"status": "success"}
    if data is not None:
        payload["data"] = data
    if extras:
        payload.update(extras)
    return payload


def fail(status: int, message: str):
    raise HTTPException(status, message)


def fail_from(e: AppError):
    """Map core errors onto HTTP: caller mistakes are 400s."""
    if isinstance(e, (InvalidInputError, InvalidModeError)):
        fail(400, str(e))
    fail(500, f"Internal error: {e}")


def get_services(request: Request) -> Services:
    return request.app.state.services
