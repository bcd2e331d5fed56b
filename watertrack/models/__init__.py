from watertrack.models.user import User
from watertrack.models.category import Category
from watertrack.models.device import Device
from watertrack.models.usage import Usage
from watertrack.models.bill import Bill

__all__ = ["User", "Category", "Device", "Usage", "Bill"]
