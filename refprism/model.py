"""Wavefront OBJ/MTL loading and a cache of loaded models."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

from .vector import Color, Vector2, Vector3

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Material:
    """Surface parameters of one material."""

    ambient: Color = Color(0.0, 0.0, 0.0, 0.0)
    diffuse: Color = Color(0.0, 0.0, 0.0, 0.0)
    specular: Color = Color(0.0, 0.0, 0.0, 0.0)
    emission: Color = Color(0.0, 0.0, 0.0, 0.0)
    shininess: float = 0.0
    texture_enable: bool = False


@dataclass
class ModelMaterial:
    """A named material and the path of its diffuse texture."""

    name: str = ""
    material: Material = field(default_factory=Material)
    texture_name: str = ""


@dataclass
class Subset:
    """A run of indices drawn with one material."""

    start_index: int = 0
    index_num: int = 0
    material: ModelMaterial = field(default_factory=ModelMaterial)


@dataclass(frozen=True)
class Vertex:
    position: Vector3
    normal: Vector3
    diffuse: Color = Color(1.0, 1.0, 1.0, 1.0)
    tex_coord: Vector2 = Vector2(0.0, 0.0)


@dataclass
class Model:
    """Vertex and index data of a mesh split into material subsets."""

    vertices: List[Vertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    subsets: List[Subset] = field(default_factory=list)


def _floats(values: List[str], count: int, keyword: str) -> Tuple[float, ...]:
    if len(values) < count:
        raise ValueError(f"'{keyword}' needs {count} values")
    try:
        return tuple(float(v) for v in values[:count])
    except ValueError as exc:
        raise ValueError(f"bad number after '{keyword}'") from exc


def _lines(path: PathLike) -> Iterator[Tuple[str, List[str]]]:
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            parts = line.split()
            if parts and not parts[0].startswith("#"):
                yield parts[0], parts[1:]


def load_material(path: PathLike) -> List[ModelMaterial]:
    """Read the materials of an MTL file, in file order."""
    directory = os.path.dirname(os.fspath(path))
    materials: List[ModelMaterial] = []

    for keyword, args in _lines(path):
        if keyword == "newmtl":
            if not args:
                raise ValueError("'newmtl' needs a name")
            materials.append(ModelMaterial(name=args[0]))
            continue
        if keyword not in ("Ka", "Kd", "Ks", "Ns", "d", "map_Kd"):
            continue
        if not materials:
            raise ValueError(f"'{keyword}' before any 'newmtl'")
        current = materials[-1]
        mat = current.material
        if keyword == "Ka":
            mat.ambient = Color(*_floats(args, 3, keyword), 1.0)
        elif keyword == "Kd":
            mat.diffuse = Color(*_floats(args, 3, keyword), 1.0)
        elif keyword == "Ks":
            mat.specular = Color(*_floats(args, 3, keyword), 1.0)
        elif keyword == "Ns":
            (mat.shininess,) = _floats(args, 1, keyword)
        elif keyword == "d":
            (alpha,) = _floats(args, 1, keyword)
            d = mat.diffuse
            mat.diffuse = Color(d.r, d.g, d.b, alpha)
        else:
            if not args:
                raise ValueError("'map_Kd' needs a file name")
            current.texture_name += os.path.join(directory, args[0])
    return materials


def _lookup(items: list, token: str, kind: str) -> object:
    try:
        index = int(token)
    except ValueError as exc:
        raise ValueError(f"bad {kind} index: {token!r}") from exc
    if not 1 <= index <= len(items):
        raise ValueError(f"{kind} index out of range: {index}")
    return items[index - 1]


def load_obj(path: PathLike) -> Model:
    """Read an OBJ file; quads become two triangles, vertices are not shared."""
    directory = os.path.dirname(os.fspath(path))
    positions: List[Vector3] = []
    normals: List[Vector3] = []
    tex_coords: List[Vector2] = []
    materials: List[ModelMaterial] = []
    model = Model()

    def close_subset() -> None:
        if model.subsets:
            last = model.subsets[-1]
            last.index_num = len(model.indices) - last.start_index

    for keyword, args in _lines(path):
        if keyword == "mtllib":
            if not args:
                raise ValueError("'mtllib' needs a file name")
            materials = load_material(os.path.join(directory, args[0]))
        elif keyword == "v":
            positions.append(Vector3(*_floats(args, 3, keyword)))
        elif keyword == "vn":
            normals.append(Vector3(*_floats(args, 3, keyword)))
        elif keyword == "vt":
            u, v = _floats(args, 2, keyword)
            tex_coords.append(Vector2(1.0 - u, 1.0 - v))
        elif keyword == "usemtl":
            if not args:
                raise ValueError("'usemtl' needs a name")
            close_subset()
            found = next((m for m in materials if m.name == args[0]), None)
            subset = Subset(start_index=len(model.indices))
            if found is not None:
                subset.material = ModelMaterial(
                    name=found.name,
                    material=Material(**vars(found.material)),
                    texture_name=found.texture_name,
                )
            model.subsets.append(subset)
        elif keyword == "f":
            if not args:
                raise ValueError("'f' needs vertices")
            for token in args:
                parts = token.split("/")
                if len(parts) < 3:
                    raise ValueError(f"face vertex without normal: {token!r}")
                position = _lookup(positions, parts[0], "position")
                tex_coord = (
                    _lookup(tex_coords, parts[1], "texcoord") if parts[1] else Vector2(0.0, 0.0)
                )
                normal = _lookup(normals, parts[2], "normal")
                model.indices.append(len(model.vertices))
                model.vertices.append(Vertex(position, normal, tex_coord=tex_coord))
            if len(args) == 4:
                count = len(model.vertices)
                model.indices.extend((count - 4, count - 2))

    close_subset()
    return model


class ModelCache:
    """Loads each model file once and hands out the shared result."""

    def __init__(self) -> None:
        self._pool: Dict[str, Model] = {}

    def __contains__(self, path: PathLike) -> bool:
        return os.fspath(path) in self._pool

    def __len__(self) -> int:
        return len(self._pool)

    @staticmethod
    def _load(path: str) -> Model:
        model = load_obj(path)
        for subset in model.subsets:
            name = subset.material.texture_name
            subset.material.material.texture_enable = bool(name) and Path(name).is_file()
        return model

    def preload(self, path: PathLike) -> None:
        key = os.fspath(path)
        if key not in self._pool:
            self._pool[key] = self._load(key)

    def load(self, path: PathLike) -> Model:
        self.preload(path)
        return self._pool[os.fspath(path)]

    def unload_all(self) -> None:
        self._pool.clear()