import pytest

from refprism.model import ModelCache, load_material, load_obj
from refprism.vector import Color, Vector2, Vector3

MTL = """\
newmtl red
Ka 0.1 0.2 0.3
Kd 1 0 0
Ks 0.5 0.5 0.5
Ns 32
d 0.5
map_Kd tex.png
newmtl plain
Kd 0 1 0
"""

OBJ = """\
# sample
mtllib shape.mtl
o thing
v 0 0 0
v 1 0 0
v 0 0 1
v 1 0 1
vt 0.25 0.75
vn 0 1 0
usemtl red
f 1/1/1 2/1/1 3/1/1 4/1/1
usemtl missing
f 1//1 2//1 3//1
"""


@pytest.fixture
def obj_path(tmp_path):
    (tmp_path / "shape.mtl").write_text(MTL)
    path = tmp_path / "shape.obj"
    path.write_text(OBJ)
    return path


def test_load_material_reads_fields(tmp_path):
    path = tmp_path / "shape.mtl"
    path.write_text(MTL)
    materials = load_material(path)
    assert [m.name for m in materials] == ["red", "plain"]
    red = materials[0]
    assert red.material.ambient == Color(0.1, 0.2, 0.3, 1.0)
    assert red.material.diffuse == Color(1.0, 0.0, 0.0, 0.5)
    assert red.material.specular == Color(0.5, 0.5, 0.5, 1.0)
    assert red.material.emission == Color(0.0, 0.0, 0.0, 0.0)
    assert red.material.shininess == 32.0
    assert red.texture_name == str(tmp_path / "tex.png")
    assert materials[1].texture_name == ""


def test_material_property_before_newmtl_raises(tmp_path):
    path = tmp_path / "bad.mtl"
    path.write_text("Kd 1 1 1\n")
    with pytest.raises(ValueError):
        load_material(path)


def test_load_obj_splits_quads_and_subsets(obj_path):
    model = load_obj(obj_path)
    assert len(model.vertices) == 7
    assert model.indices == [0, 1, 2, 3, 0, 2, 4, 5, 6]
    assert [(s.start_index, s.index_num) for s in model.subsets] == [(0, 6), (6, 3)]
    assert sum(s.index_num for s in model.subsets) == len(model.indices)


def test_load_obj_vertex_data(obj_path):
    model = load_obj(obj_path)
    first = model.vertices[0]
    assert model.vertices[3].position == Vector3(1.0, 0.0, 1.0)
    assert first.normal == Vector3(0.0, 1.0, 0.0)
    assert first.tex_coord == Vector2(1.0 - 0.25, 1.0 - 0.75)
    assert first.diffuse == Color(1.0, 1.0, 1.0, 1.0)
    assert model.vertices[4].tex_coord == Vector2(0.0, 0.0)


def test_load_obj_assigns_materials(obj_path):
    model = load_obj(obj_path)
    assert model.subsets[0].material.name == "red"
    assert model.subsets[0].material.material.diffuse == Color(1.0, 0.0, 0.0, 0.5)
    assert model.subsets[1].material.name == ""


def test_face_index_out_of_range_raises(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 0 0\nvn 0 1 0\nf 1//1 2//1 1//1\n")
    with pytest.raises(ValueError):
        load_obj(path)


def test_face_without_normal_raises(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 0 0\nvt 0 0\nf 1/1 1/1 1/1\n")
    with pytest.raises(ValueError):
        load_obj(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "absent.obj")


def test_cache_shares_loaded_models(obj_path):
    cache = ModelCache()
    cache.preload(obj_path)
    assert obj_path in cache
    first = cache.load(obj_path)
    assert cache.load(str(obj_path)) is first
    assert len(cache) == 1
    cache.unload_all()
    assert len(cache) == 0
    assert cache.load(obj_path) is not first


def test_cache_enables_texture_only_when_file_exists(obj_path, tmp_path):
    cache = ModelCache()
    assert cache.load(obj_path).subsets[0].material.material.texture_enable is False
    (tmp_path / "tex.png").write_bytes(b"\x89PNG")
    cache.unload_all()
    model = cache.load(obj_path)
    assert model.subsets[0].material.material.texture_enable is True
    assert model.subsets[1].material.material.texture_enable is False