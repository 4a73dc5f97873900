"""
Rural Sports Backend: Enumerations
===================================

What:  The closed value sets stored in string/integer status columns.
Why:   Columns stay plain VARCHAR/INTEGER (no database ENUM types to migrate);
       the API layer validates incoming values against these enums.
"""

import enum


class Role(str, enum.Enum):
    VILLAGER = "VILLAGER"
    ORGANIZER = "ORGANIZER"
    ADMIN = "ADMIN"


class UserStatus(enum.IntEnum):
    PENDING = 0
    ACTIVE = 1
    BANNED = 2


class EventStatus(str, enum.Enum):
    UPCOMING = "UPCOMING"
    ONGOING = "ONGOING"
    FINISHED = "FINISHED"


class MaterialStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_STOCK = "IN_STOCK"
    BORROWED = "BORROWED"
    LOST = "LOST"


class DonationStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class LoanStatus(str, enum.Enum):
    BORROWED = "BORROWED"
    RETURNED = "RETURNED"


class InteractionType(str, enum.Enum):
    COMMENT = "COMMENT"
    LIKE = "LIKE"
    CONSULT = "CONSULT"
    BOARD = "BOARD"
    NOTICE = "NOTICE"
