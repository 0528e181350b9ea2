from .dynamodb_booking_repository import DynamoDBBookingRepository
from .dynamodb_room_repository import DynamoDBRoomRepository

__all__ = ["DynamoDBBookingRepository", "DynamoDBRoomRepository"]
