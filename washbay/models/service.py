"""Service catalog definitions."""

from pydantic import BaseModel, Field

from washbay.core import config


class ServiceType(BaseModel):
    """A bookable service and how long it occupies the bay."""
    name: str
    duration_minutes: int = Field(gt=0)

    class Config:
        frozen = True


SERVICE_CATALOG: tuple[ServiceType, ...] = (
    ServiceType(name='Basic Wash', duration_minutes=60),
    ServiceType(name='Interior Clean', duration_minutes=90),
    ServiceType(name='Full Detail', duration_minutes=180),
)

_SERVICES_BY_KEY = {service.name.casefold(): service for service in SERVICE_CATALOG}


def normalize_service_name(name: str | None) -> str:
    return (name or '').strip()


def list_services() -> list[ServiceType]:
    return list(SERVICE_CATALOG)


def is_known_service(name: str | None) -> bool:
    return normalize_service_name(name).casefold() in _SERVICES_BY_KEY


def resolve_service(name: str | None, default_minutes: int | None = None) -> ServiceType:
    # Unknown names still get a bay reservation, just with the default length.
    normalized = normalize_service_name(name)
    known = _SERVICES_BY_KEY.get(normalized.casefold())
    if known is not None:
        return known

    if default_minutes is None:
        default_minutes = config.DEFAULT_SERVICE_DURATION_MINUTES
    return ServiceType(name=normalized, duration_minutes=default_minutes)


def duration_of(name: str | None, default_minutes: int | None = None) -> int:
    return resolve_service(name, default_minutes).duration_minutes
