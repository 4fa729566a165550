from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping

from windshield_receipts.core.errors import InvalidJobError


class CustomerType(str, Enum):
    RETAIL = "retail"
    DEALER = "dealer"
    FLEET = "fleet"
    SUBCONTRACTOR = "subcontractor"


class JobType(str, Enum):
    WINDSHIELD_REPLACEMENT = "windshield_replacement"
    WINDSHIELD_REPAIR = "windshield_repair"
    DOOR_GLASS = "door_glass"
    BACK_GLASS = "back_glass"
    BACK_GLASS_POWERSLIDE = "back_glass_powerslide"
    QUARTER_GLASS = "quarter_glass"
    SUNROOF = "sunroof"
    SIDE_MIRROR = "side_mirror"
    UNSPECIFIED = "unspecified"


class ServiceType(str, Enum):
    REPAIR = "repair"
    REPLACE = "replace"
    CALIBRATION = "calibration"
    WARRANTY = "warranty"


class GlassType(str, Enum):
    WINDSHIELD = "windshield"
    DOOR_GLASS = "door_glass"
    BACK_GLASS = "back_glass"
    BACK_GLASS_POWERSLIDE = "back_glass_powerslide"
    QUARTER_GLASS = "quarter_glass"
    SUNROOF = "sunroof"
    SIDE_MIRROR = "side_mirror"


class CalibrationType(str, Enum):
    NONE = "none"
    STATIC = "static"
    DYNAMIC = "dynamic"
    DUAL = "dual"
    APPROVE = "approve"
    DECLINED = "declined"


@dataclass
class Part:
    """One glass line item of a vehicle."""

    job_type: JobType = JobType.UNSPECIFIED
    part_total: float = 0.0
    calibration_type: CalibrationType = CalibrationType.NONE
    service_type: ServiceType | None = None
    glass_type: GlassType | None = None

    def __post_init__(self) -> None:
        # accept raw strings from callers that build parts by hand
        self.job_type = _enum_or_none(JobType, self.job_type, "jobType") or JobType.UNSPECIFIED
        self.calibration_type = (
            _enum_or_none(CalibrationType, self.calibration_type, "calibrationType") or CalibrationType.NONE
        )
        self.service_type = _enum_or_none(ServiceType, self.service_type, "serviceType")
        self.glass_type = _enum_or_none(GlassType, self.glass_type, "glassType")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Part":
        service_type = _enum_or_none(ServiceType, data.get("serviceType"), "serviceType")
        glass_type = _enum_or_none(GlassType, data.get("glassType"), "glassType")
        legacy = _enum_or_none(JobType, data.get("jobType"), "jobType")
        return cls(
            job_type=legacy or derive_job_type(service_type, glass_type),
            part_total=_money(data.get("partTotal"), "partTotal"),
            calibration_type=_enum_or_none(CalibrationType, data.get("calibrationType"), "calibrationType")
            or CalibrationType.NONE,
            service_type=service_type,
            glass_type=glass_type,
        )


@dataclass
class Vehicle:
    year: str = ""
    make: str = ""
    model: str = ""
    vin: str = ""
    parts: List[Part] = field(default_factory=list)

    @property
    def description(self) -> str:
        return f"{self.year} {self.make} {self.model}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Vehicle":
        return cls(
            year=str(data.get("vehicleYear") or ""),
            make=str(data.get("vehicleMake") or ""),
            model=str(data.get("vehicleModel") or ""),
            vin=str(data.get("vin") or ""),
            parts=[Part.from_dict(p) for p in data.get("parts") or []],
        )


@dataclass
class Job:
    """A completed service job, as handed over by the job-management side."""

    job_number: str
    customer_type: CustomerType = CustomerType.RETAIL
    is_business: bool = False
    business_name: str = ""
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    email: str = ""
    street_address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    install_date: str = ""
    created_at: str = ""
    vehicles: List[Vehicle] = field(default_factory=list)
    total_due: float = 0.0
    amount_paid: float = 0.0
    balance_due: float = 0.0
    calibration_declined: bool = False
    signature_image: str = ""

    def __post_init__(self) -> None:
        self.customer_type = _enum_or_none(CustomerType, self.customer_type, "customerType") or CustomerType.RETAIL

    @property
    def parts(self) -> List[Part]:
        """All parts across all vehicles, in storage order."""
        return [part for vehicle in self.vehicles for part in vehicle.parts]

    @property
    def has_declined_calibration(self) -> bool:
        if self.calibration_declined:
            return True
        return any(p.calibration_type is CalibrationType.DECLINED for p in self.parts)

    @property
    def invoice_date(self) -> str:
        return self.install_date or self.created_at

    @property
    def display_name(self) -> str:
        if self.is_business and self.business_name:
            return self.business_name
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Job":
        """
        Build a Job from the upstream camelCase record (jobNumber, customerType, vehicles[].parts[] ...).
        Missing optional fields get their defaults; unknown enum values raise InvalidJobError.
        """
        if not isinstance(data, Mapping):
            raise InvalidJobError("job record must be an object")
        return cls(
            job_number=str(data.get("jobNumber") or ""),
            customer_type=_enum_or_none(CustomerType, data.get("customerType"), "customerType") or CustomerType.RETAIL,
            is_business=bool(data.get("isBusiness", False)),
            business_name=str(data.get("businessName") or ""),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            phone=str(data.get("phone") or ""),
            email=str(data.get("email") or ""),
            street_address=str(data.get("streetAddress") or ""),
            city=str(data.get("city") or ""),
            state=str(data.get("state") or ""),
            zip_code=str(data.get("zipCode") or ""),
            install_date=str(data.get("installDate") or ""),
            created_at=str(data.get("createdAt") or ""),
            vehicles=[Vehicle.from_dict(v) for v in data.get("vehicles") or []],
            total_due=_money(data.get("totalDue"), "totalDue"),
            amount_paid=_money(data.get("amountPaid"), "amountPaid"),
            balance_due=_money(data.get("balanceDue"), "balanceDue"),
            calibration_declined=bool(data.get("calibrationDeclined", False)),
            signature_image=str(data.get("signatureImage") or ""),
        )


_GLASS_TO_JOB_TYPE = {
    GlassType.DOOR_GLASS: JobType.DOOR_GLASS,
    GlassType.BACK_GLASS: JobType.BACK_GLASS,
    GlassType.BACK_GLASS_POWERSLIDE: JobType.BACK_GLASS_POWERSLIDE,
    GlassType.QUARTER_GLASS: JobType.QUARTER_GLASS,
    GlassType.SUNROOF: JobType.SUNROOF,
    GlassType.SIDE_MIRROR: JobType.SIDE_MIRROR,
}


def derive_job_type(service_type: ServiceType | None, glass_type: GlassType | None) -> JobType:
    """Map the newer serviceType + glassType pair onto the legacy job type."""
    if glass_type is GlassType.WINDSHIELD:
        if service_type is ServiceType.REPAIR:
            return JobType.WINDSHIELD_REPAIR
        if service_type is ServiceType.REPLACE:
            return JobType.WINDSHIELD_REPLACEMENT
        return JobType.UNSPECIFIED
    if service_type is ServiceType.REPLACE and glass_type in _GLASS_TO_JOB_TYPE:
        return _GLASS_TO_JOB_TYPE[glass_type]
    return JobType.UNSPECIFIED


def _enum_or_none(enum_cls, value, field_name: str):
    if value is None or value == "":
        return None
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidJobError(f"unknown {field_name} {value!r}") from None


def _money(value, field_name: str) -> float:
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        raise InvalidJobError(f"{field_name} must be a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidJobError(f"{field_name} must be a number, got {value!r}") from None
