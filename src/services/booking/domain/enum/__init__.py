from .room_type import RoomType

__all__ = ["RoomType"]
