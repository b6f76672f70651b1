"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.desk_booking.driven_adapter.model.desk_booking_model import DeskBookingModel
from src.service.desk_booking.driven_adapter.model.desk_model import DeskModel

__all__ = [
    'DeskBookingModel',
    'DeskModel',
]
