from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - エンティティの読み出しを抽象化する
    - 書き込み操作は各リポジトリが必要なものだけを定義する
    """

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDでエンティティを検索する"""
        raise NotImplementedError
