"""Data model for merge dry-run input snapshots, reports, and plans."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any


class InputValidationError(ValueError):
    """Raised when an input record does not match the expected shape."""


def _require_list(value: object, path: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise InputValidationError(
            f"{path}: expected a list, got {type(value).__name__}"
        )
    return value


def _require_mapping(value: object, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InputValidationError(
            f"{path}: expected an object, got {type(value).__name__}"
        )
    return value


def _require_str(value: object, path: str) -> str:
    if not isinstance(value, str):
        raise InputValidationError(
            f"{path}: expected a string, got {type(value).__name__}"
        )
    return value


def _optional_str(value: object, path: str) -> str | None:
    # null and a missing key both mean "no value"; "" is kept as a real name
    if value is None:
        return None
    return _require_str(value, path)


@dataclass(frozen=True)
class Bone:
    """One joint in a skeleton, identified by name."""

    name: str
    parent_name: str | None = None

    @classmethod
    def from_dict(cls, record: object, path: str = "bone") -> "Bone":
        data = _require_mapping(record, path)
        return cls(
            name=_require_str(data.get("name"), f"{path}.name"),
            parent_name=_optional_str(data.get("parent_name"), f"{path}.parent_name"),
        )

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "parent_name": self.parent_name}


@dataclass(frozen=True)
class SkinnedMesh:
    """A skinned mesh renderer bound to bones of the clothing skeleton.

    ``root_bone`` and ``bones`` are name references and are not checked
    against any skeleton.
    """

    name: str
    root_bone: str | None = None
    bones: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, record: object, path: str = "smr") -> "SkinnedMesh":
        data = _require_mapping(record, path)
        raw_bones = _require_list(data.get("bones"), f"{path}.bones")
        return cls(
            name=_require_str(data.get("name"), f"{path}.name"),
            root_bone=_optional_str(data.get("root_bone"), f"{path}.root_bone"),
            bones=tuple(
                _require_str(bone, f"{path}.bones[{i}]")
                for i, bone in enumerate(raw_bones)
            ),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "root_bone": self.root_bone,
            "bones": list(self.bones),
        }

    def referenced_names(self) -> list[str]:
        """Root bone (if any) followed by the bone list, in order."""
        names = [self.root_bone] if self.root_bone is not None else []
        names.extend(self.bones)
        return names


@dataclass(frozen=True)
class AnalysisInput:
    """Snapshot of both skeletons, the clothing meshes and the naming suffix."""

    avatar_bones: tuple[Bone, ...] = ()
    clothing_bones: tuple[Bone, ...] = ()
    clothing_smrs: tuple[SkinnedMesh, ...] = ()
    suffix: str = ""

    @classmethod
    def from_dict(cls, record: object) -> "AnalysisInput":
        """Build an input snapshot from a decoded JSON record.

        Raises:
            InputValidationError: if the record has the wrong shape.
        """
        data = _require_mapping(record, "input")
        suffix = data.get("suffix")
        return cls(
            avatar_bones=tuple(
                Bone.from_dict(item, f"avatar_bones[{i}]")
                for i, item in enumerate(
                    _require_list(data.get("avatar_bones"), "avatar_bones")
                )
            ),
            clothing_bones=tuple(
                Bone.from_dict(item, f"clothing_bones[{i}]")
                for i, item in enumerate(
                    _require_list(data.get("clothing_bones"), "clothing_bones")
                )
            ),
            clothing_smrs=tuple(
                SkinnedMesh.from_dict(item, f"clothing_smrs[{i}]")
                for i, item in enumerate(
                    _require_list(data.get("clothing_smrs"), "clothing_smrs")
                )
            ),
            suffix="" if suffix is None else _require_str(suffix, "suffix"),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "avatar_bones": [b.to_dict() for b in self.avatar_bones],
            "clothing_bones": [b.to_dict() for b in self.clothing_bones],
            "clothing_smrs": [s.to_dict() for s in self.clothing_smrs],
            "suffix": self.suffix,
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Result of a dry-run analysis. Field order is the record's key order."""

    duplicate_avatar_bone_names: tuple[str, ...] = ()
    duplicate_clothing_bone_names: tuple[str, ...] = ()
    referenced_clothing_bones: int = 0
    estimated_moved_bones: int = 0
    estimated_moved_smrs: int = 0
    estimated_renamed_bones: int = 0
    estimated_renamed_smrs: int = 0
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        record = asdict(self)
        for key, value in record.items():
            if isinstance(value, tuple):
                record[key] = list(value)
        return record

    @classmethod
    def from_dict(cls, record: object) -> "AnalysisReport":
        data = _require_mapping(record, "report")
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.type is int:
                if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                    raise InputValidationError(
                        f"{f.name}: expected a non-negative integer"
                    )
                values[f.name] = value
            else:
                values[f.name] = tuple(
                    _require_str(item, f"{f.name}[{i}]")
                    for i, item in enumerate(_require_list(value, f.name))
                )
        return cls(**values)

    @property
    def has_duplicates(self) -> bool:
        return bool(
            self.duplicate_avatar_bone_names or self.duplicate_clothing_bone_names
        )


@dataclass(frozen=True)
class MergePlan:
    """Names behind the report counts: what a merge would move and rename."""

    suffix: str = ""
    moved_bones: tuple[str, ...] = ()
    renamed_bones: tuple[tuple[str, str], ...] = ()
    renamed_smrs: tuple[tuple[str, str], ...] = ()
    unresolved_references: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "suffix": self.suffix,
            "moved_bones": list(self.moved_bones),
            "renamed_bones": [
                {"from": old, "to": new} for old, new in self.renamed_bones
            ],
            "renamed_smrs": [
                {"from": old, "to": new} for old, new in self.renamed_smrs
            ],
            "unresolved_references": list(self.unresolved_references),
        }
