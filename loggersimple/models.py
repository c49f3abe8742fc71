import typing
import pydantic


API_URL: str = "https://api.logger-simple.com/java/"
DEFAULT_HEARTBEAT_INTERVAL_MS: int = 5000
SUCCESS_MARKER: str = '"success":true'

LogLevel = typing.Literal["success", "info", "error", "critical"]
LOG_LEVELS: tuple[str, ...] = typing.get_args(LogLevel)

NonEmptyString = typing.Annotated[
    str, pydantic.StringConstraints(strip_whitespace=True, min_length=1)
]


class Credentials(pydantic.BaseModel):
    """Application identifier and API key sent with every request"""

    # Hide values as they contain the API key
    model_config = pydantic.ConfigDict(frozen=True, hide_input_in_errors=True)
    app_id: NonEmptyString
    api_key: pydantic.SecretStr

    @pydantic.field_validator("api_key")
    @classmethod
    def check_api_key(cls, v: pydantic.SecretStr) -> pydantic.SecretStr:
        if not v.get_secret_value().strip():
            raise AssertionError("API key cannot be empty")
        return v


class HeartbeatConfig(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)
    interval_ms: int = DEFAULT_HEARTBEAT_INTERVAL_MS

    @pydantic.field_validator("interval_ms", mode="before")
    @classmethod
    def default_non_positive_interval(cls, v: typing.Any) -> typing.Any:
        if v is None or (isinstance(v, int | float) and v <= 0):
            return DEFAULT_HEARTBEAT_INTERVAL_MS
        return v


class APIResponse(pydantic.BaseModel):
    """Status code and raw body of a server response"""

    model_config = pydantic.ConfigDict(frozen=True)
    status_code: int
    body: str

    @property
    def successful(self) -> bool:
        return self.status_code == 200 and SUCCESS_MARKER in self.body
