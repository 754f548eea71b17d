"""Import every model so relationships resolve and Base.metadata is complete."""

from app.models.user import User  # noqa: F401
from app.models.property import Property, Unit  # noqa: F401
from app.models.tech_profile import TechProfile  # noqa: F401
from app.models.membership import Membership  # noqa: F401
from app.models.invoice import Invoice  # noqa: F401
from app.models.job import Job, JobNumberSequence  # noqa: F401
from app.models.lead import Lead  # noqa: F401
from app.models.service_request import ServiceRequest  # noqa: F401
from app.models.daily_metric import DailyMetric  # noqa: F401
