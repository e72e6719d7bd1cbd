"""Mediator: a chatroom routes messages so participants never reference each other."""

from __future__ import annotations

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class Participant:
    def __init__(self, name: str, log: TraceLog) -> None:
        self.name = name
        self.chatroom: Chatroom | None = None
        self._log = log

    def send(self, message: str, to: Participant | None = None) -> None:
        if self.chatroom is not None:
            self.chatroom.send(message, self, to)

    def receive(self, message: str, sender: Participant) -> None:
        self._log.add(f"{sender.name} to {self.name}: {message}")


class Chatroom:
    """Delivers direct messages to one recipient and broadcasts to the rest."""

    def __init__(self) -> None:
        self._participants: dict[str, Participant] = {}

    def register(self, participant: Participant) -> None:
        self._participants[participant.name] = participant
        participant.chatroom = self

    def send(self, message: str, sender: Participant, to: Participant | None = None) -> None:
        if to is not None:
            to.receive(message, sender)
            return
        for participant in self._participants.values():
            if participant is not sender:
                participant.receive(message, sender)


@register_pattern(
    "mediator",
    title="Mediator",
    category=PatternCategory.BEHAVIORAL,
    summary="Chatroom mediating direct and broadcast messages",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    yoko = Participant("Yoko", log)
    john = Participant("John", log)
    paul = Participant("Paul", log)
    ringo = Participant("Ringo", log)

    chatroom = Chatroom()
    for participant in (yoko, john, paul, ringo):
        chatroom.register(participant)

    yoko.send("All you need is love.")
    yoko.send("I love you John.")
    john.send("Hey, no need to broadcast", yoko)
    paul.send("Ha, I heard that!")
    ringo.send("Paul, what do you think?", paul)
    log.show()


if __name__ == "__main__":
    run()
