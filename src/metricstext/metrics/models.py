"""Data models for metric identities."""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple, Union

from ..errors import InvalidKeyError


@dataclass(frozen=True)
class Label:
    """A single key/value tag attached to a metric."""
    
    key: str
    value: str
    
    def __str__(self) -> str:
        return f'{self.key}="{self.value}"'


LabelsLike = Union[None, Mapping[str, Any], Iterable[Union[Label, Tuple[str, Any]]]]


@dataclass(frozen=True)
class Key:
    """Identity of a metric: a dot-separated name plus an ordered set of labels.
    
    Labels keep the order the caller supplied them in. That order is used
    verbatim when the key is rendered, and it is part of the key's identity.
    """
    
    name: str
    labels: Tuple[Label, ...] = ()
    
    @classmethod
    def from_name(cls, name: str, labels: LabelsLike = None) -> "Key":
        """Create a key from a name and optional labels.
        
        Args:
            name: Hierarchical metric name, e.g. "server.msgs_sent"
            labels: None, a mapping of label keys to values, or an iterable of
                ``Label`` instances or ``(key, value)`` pairs
                
        Returns:
            Key instance
        """
        return cls(name=name, labels=_normalize_labels(labels))
    
    def has_labels(self) -> bool:
        return len(self.labels) > 0


def _normalize_labels(labels: LabelsLike) -> Tuple[Label, ...]:
    if labels is None:
        return ()
    
    if isinstance(labels, Mapping):
        pairs: Iterable[Any] = labels.items()
    else:
        pairs = labels
    
    normalized = []
    seen = set()
    for item in pairs:
        label = item if isinstance(item, Label) else Label(str(item[0]), str(item[1]))
        if label.key in seen:
            raise InvalidKeyError(f"Duplicate label key: {label.key}")
        seen.add(label.key)
        normalized.append(label)
    
    return tuple(normalized)
