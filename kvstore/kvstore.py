from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field


@dataclass
class KeyValueStore(metaclass=ABCMeta):
    # string slots addressed by a well-known key, like a browser's localStorage

    name: str

    @abstractmethod
    def get_item(self, key: str) -> str | None: ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None: ...

    @abstractmethod
    def remove_item(self, key: str) -> None: ...


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    items: dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)
