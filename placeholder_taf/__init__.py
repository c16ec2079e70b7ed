"""Per-resource HTTP client wrappers for JSONPlaceholder API tests."""
from .client import RequestSpec, ValidatableResponse
from .config import ApiSettings, load_settings
from .endpoints import CommentEndpoint, UserEndpoint, WebEndpoint
from .errors import EndpointError, RequestSpecError, ResponseBodyError, UnexpectedStatusError
from .http_status import HttpStatus
from .logger import configure_logging, get_logger
from .models import AddressDto, CommentDto, CompanyDto, GeoDto, UserDto

__version__ = "0.1.0"
