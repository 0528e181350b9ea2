from dataclasses import dataclass


@dataclass(frozen=True)
class AllocationResult:
    """部屋割り当ての結果

    assigned_room_ids: 予約に割り当てる部屋（要求室数と同数）
    to_release: 保持していたが不要になった部屋（空室に戻す）
    to_occupy: 新たに割り当てた部屋（使用中にする）
    """

    assigned_room_ids: tuple[str, ...]
    to_release: tuple[str, ...] = ()
    to_occupy: tuple[str, ...] = ()

    @property
    def has_inventory_changes(self) -> bool:
        return bool(self.to_release or self.to_occupy)
