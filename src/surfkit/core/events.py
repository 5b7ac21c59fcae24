# どこで: `src/surfkit/core/events.py`。
# 何を: ペイロード無しの通知ストリーム（Event）と購読ハンドル（Subscription）を提供する。
# なぜ: 購読の寿命を UI 部品の寿命へ明示的に結び付け、破棄経路に関わらず購読解除できるようにするため。

from __future__ import annotations

import logging
from collections.abc import Callable

_logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class Subscription:
    """Event への 1 件の購読。`close()` または with 文の終了で解除される。"""

    __slots__ = ("_event", "_listener")

    def __init__(self, event: Event, listener: Listener) -> None:
        self._event: Event | None = event
        self._listener = listener

    @property
    def active(self) -> bool:
        return self._event is not None

    def close(self) -> None:
        """購読を解除する（二重解除は無視する）。"""

        event = self._event
        if event is None:
            return
        self._event = None
        event._remove(self)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class Event:
    """購読者へ引数無しで通知するイベント。

    Notes
    -----
    - 配送順は購読順だが、利用側はこれに依存しない前提。
    - 通知中の購読/解除を許容する（通知開始時点の購読者へ配る。解除済みは飛ばす）。
    - 購読者の例外はログへ出し、残りの購読者への配送を続ける。
    """

    def __init__(self, name: str = "event") -> None:
        self.name = str(name)
        self._subscriptions: list[Subscription] = []

    def subscribe(self, listener: Listener) -> Subscription:
        """listener を購読者として登録し、購読ハンドルを返す。"""

        if not callable(listener):
            raise TypeError(f"listener は callable である必要があります: got={listener!r}")
        subscription = Subscription(self, listener)
        self._subscriptions.append(subscription)
        return subscription

    def fire(self) -> None:
        """全購読者へ通知する。"""

        for subscription in tuple(self._subscriptions):
            if not subscription.active:
                continue
            try:
                subscription._listener()
            except Exception:
                _logger.exception("%s の購読者で例外が発生しました", self.name)

    def _remove(self, subscription: Subscription) -> None:
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            pass

    def __len__(self) -> int:
        return len(self._subscriptions)


__all__ = ["Event", "Listener", "Subscription"]
