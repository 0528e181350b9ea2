from abc import abstractmethod
from collections.abc import Iterable

from services.booking.domain.entity.room import Room
from services.shared.domain import Repository


class RoomRepository(Repository[Room, str]):
    """在庫（部屋）リポジトリのインターフェース"""

    @abstractmethod
    def find_by_id(self, room_id: str) -> Room | None:
        """部屋IDで検索する"""
        raise NotImplementedError

    def find_by_ids(self, room_ids: Iterable[str]) -> list[Room]:
        """複数の部屋を検索する

        引数の順序を保ち、在庫に存在しない部屋は結果に含めない。
        """
        rooms = []
        for room_id in room_ids:
            room = self.find_by_id(room_id)
            if room is not None:
                rooms.append(room)
        return rooms

    @abstractmethod
    def find_available(self) -> list[Room]:
        """空室をすべて取得する（ストアが返した順序のまま）"""
        raise NotImplementedError

    @abstractmethod
    def set_availability(self, room_id: str, available: bool) -> None:
        """部屋の空き状況を更新する

        Raises:
            InventoryUpdateFailedException: 更新できなかった場合
        """
        raise NotImplementedError
