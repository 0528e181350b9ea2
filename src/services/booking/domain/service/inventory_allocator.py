from collections.abc import Sequence

from services.booking.domain.entity.room import Room
from services.booking.domain.enum import RoomType
from services.booking.domain.value_object.allocation_result import AllocationResult
from services.booking.domain.value_object.room_counts import RoomCounts
from services.shared.domain.exception import (
    InsufficientInventoryException,
    InventoryShortage,
)


class InventoryAllocator:
    """部屋割り当てのドメインサービス

    要求された部屋タイプ別の室数を、具体的な部屋IDに変換する。
    予約変更時は既に保持している部屋を優先して使い回し、
    不要な解放と再確保を避ける。I/O は行わない。
    """

    def allocate(
        self,
        required: RoomCounts,
        held_rooms: Sequence[Room],
        available_rooms: Sequence[Room],
    ) -> AllocationResult:
        """部屋を割り当てる

        Args:
            required: 部屋タイプ別の要求室数
            held_rooms: この予約に割り当て済みの部屋（新規予約なら空）
            available_rooms: 割り当て時点の空室スナップショット

        Returns:
            AllocationResult: 割り当て結果と在庫の差分

        Raises:
            InsufficientInventoryException: いずれかのタイプで室数が足りない場合
                （不足しているタイプをすべて報告し、部分的な結果は返さない）
        """
        held_ids = {room.id for room in held_rooms}
        assigned: list[str] = []
        shortages: list[InventoryShortage] = []

        for room_type, count in required.items():
            kept = self._pick(held_rooms, room_type, count, exclude=set())
            candidates = self._pick(
                available_rooms, room_type, count - len(kept), exclude=held_ids
            )
            picked = kept + candidates
            if len(picked) < count:
                shortages.append(
                    InventoryShortage(
                        room_type=room_type.value,
                        requested=count,
                        available=len(picked),
                    )
                )
                continue
            assigned.extend(picked)

        if shortages:
            raise InsufficientInventoryException(shortages)

        assigned_ids = set(assigned)
        return AllocationResult(
            assigned_room_ids=tuple(assigned),
            to_release=tuple(
                room.id for room in self._unique(held_rooms) if room.id not in assigned_ids
            ),
            to_occupy=tuple(room_id for room_id in assigned if room_id not in held_ids),
        )

    @staticmethod
    def _pick(
        rooms: Sequence[Room], room_type: RoomType, limit: int, exclude: set[str]
    ) -> list[str]:
        """指定タイプの部屋を先頭から limit 件まで選ぶ"""
        picked: list[str] = []
        if limit <= 0:
            return picked
        for room in rooms:
            if room.room_type != room_type or room.id in exclude or room.id in picked:
                continue
            picked.append(room.id)
            if len(picked) == limit:
                break
        return picked

    @staticmethod
    def _unique(rooms: Sequence[Room]) -> list[Room]:
        seen: set[str] = set()
        unique = []
        for room in rooms:
            if room.id not in seen:
                seen.add(room.id)
                unique.append(room)
        return unique
