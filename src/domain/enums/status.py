"""Lifecycle status shared by catalog entities.

Api, Environment, Plan and Developer each carry a status. Transition rules
belong to the gateway's operators; this service only records the value.
"""

from enum import Enum


class Status(str, Enum):
    """Lifecycle status of a catalog entity.

    String Enum:
        Inherits from str for easy serialization and database storage.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
