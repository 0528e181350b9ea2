from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor

from aws_lambda_powertools import Logger

from services.booking.domain.repository.room_repository import RoomRepository
from services.shared.domain.exception import InventoryUpdateFailedException

logger = Logger(child=True)


class InventoryMutator:
    """割り当て結果を在庫テーブルに反映するドメインサービス

    解放（空室に戻す）と確保（使用中にする）は部屋IDが重ならないため並列に発行する。
    トランザクションではないため、途中で失敗すると在庫が部分的に更新された状態になる。
    """

    def __init__(self, repository: RoomRepository, max_workers: int = 8) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._repository = repository
        self._max_workers = max_workers

    def apply(self, to_release: Iterable[str], to_occupy: Iterable[str]) -> None:
        """空き状況の変更を反映する

        投入した更新がすべて終わるまで待ってから結果を判定する。

        Raises:
            InventoryUpdateFailedException: 1部屋でも更新に失敗した場合
        """
        release_ids = list(dict.fromkeys(to_release))
        occupy_ids = list(dict.fromkeys(to_occupy))
        overlap = set(release_ids) & set(occupy_ids)
        if overlap:
            raise ValueError(
                f"Rooms cannot be released and occupied at once: {sorted(overlap)}"
            )

        updates = [(room_id, True) for room_id in release_ids] + [
            (room_id, False) for room_id in occupy_ids
        ]
        if not updates:
            return

        workers = min(self._max_workers, len(updates))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures: dict[str, Future] = {
                room_id: executor.submit(
                    self._repository.set_availability, room_id, available
                )
                for room_id, available in updates
            }

        failures: list[tuple[str, BaseException]] = []
        for room_id, future in futures.items():
            error = future.exception()
            if error is not None:
                failures.append((room_id, error))

        if not failures:
            logger.info(
                "Inventory updated",
                extra={"released": release_ids, "occupied": occupy_ids},
            )
            return

        logger.error(
            "Inventory update partially failed",
            extra={
                "failed_room_ids": [room_id for room_id, _ in failures],
                "released": release_ids,
                "occupied": occupy_ids,
            },
        )
        room_id, error = failures[0]
        if isinstance(error, InventoryUpdateFailedException):
            raise error
        raise InventoryUpdateFailedException(room_id, str(error)) from error
