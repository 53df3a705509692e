from fastapi import Request
from fastapi.responses import JSONResponse


class InvalidInput(ValueError):
    """A valuation request the engine refuses to price (bad or missing field)."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": [{"loc": ["body", exc.field], "msg": exc.message, "type": "invalid_input"}]},
    )
