from typing import Dict, Iterable, Tuple

from domain.constants import FIRST_ORDER
from domain.errors import ConflictError, NotFoundError

class SetOrderPlanner:
    """
    セット内の曲順を計画する責務を持つ。
    DB には触れず {song_id: order} の辞書だけを扱い、変更後の辞書を返す。
    Insert / Remove 後の order は常に 1..N の連番になる。
    """

    def resolve_insert_position(self, current: Dict[int, int], requested_order: int) -> int:
        """
        挿入位置を決定する。有効範囲は 1..N+1 で、N+1 を超える値は末尾に丸める。
        """
        if requested_order < FIRST_ORDER:
            raise ConflictError("Order must be a positive integer")
        return min(requested_order, len(current) + 1)

    def plan_insert(self, current: Dict[int, int], song_id: int, requested_order: int) -> Dict[int, int]:
        if song_id in current:
            raise ConflictError("Song is already in the set")

        position = self.resolve_insert_position(current, requested_order)

        # 挿入位置以降の曲を1つずつ後ろへずらす
        plan = {
            sid: order + 1 if order >= position else order
            for sid, order in current.items()
        }
        plan[song_id] = position
        return plan

    def plan_remove(self, current: Dict[int, int], song_id: int) -> Dict[int, int]:
        if song_id not in current:
            raise NotFoundError("Song not found in set")

        removed_order = current[song_id]
        return {
            sid: order - 1 if order > removed_order else order
            for sid, order in current.items()
            if sid != song_id
        }

    def plan_reorder(self, current: Dict[int, int], song_orders: Iterable[Tuple[int, int]]) -> Dict[int, int]:
        """
        指定された曲の order を上書きする。
        セットに含まれない song_id は無視する。結果が連番かどうかは検証しない。
        """
        plan = dict(current)
        for song_id, order in song_orders:
            if song_id in plan:
                plan[song_id] = order
        return plan

    @staticmethod
    def changed_entries(current: Dict[int, int], plan: Dict[int, int]) -> Dict[int, int]:
        """既存メンバーのうち order が変わるものだけを返す"""
        return {
            sid: order for sid, order in plan.items()
            if sid in current and current[sid] != order
        }

    @staticmethod
    def is_dense(orders: Iterable[int]) -> bool:
        values = sorted(orders)
        return values == list(range(FIRST_ORDER, FIRST_ORDER + len(values)))
