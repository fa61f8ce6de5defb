# Fleet Manager — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.vehicle import Vehicle                        # noqa
from app.models.part import Part                              # noqa
from app.models.maintenance_record import MaintenanceRecord   # noqa
from app.models.part_usage import PartUsage                   # noqa
from app.models.alert import Alert                            # noqa
