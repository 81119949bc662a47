import pytest
from pydantic import ValidationError

from skillyaml.core import Node, ValueCoercionError
from fabled.options import ComponentOption, StringSelect, DoubleSelect, BooleanSelect, MaterialSelect


def test_string_select():
    option = StringSelect(key="message", value="hello")
    assert option.get_data() == {"message": "hello"}

    option.deserialize(Node(entries={"message": "bye"}))
    assert option.value == "bye"

    option.deserialize(Node())
    assert option.value == "bye"


def test_double_select():
    option = DoubleSelect(key="value", value=3)
    assert option.value == 3.0
    assert option.get_summary() == "3.0"

    option.deserialize(Node(entries={"value": 7}))
    assert option.value == 7.0

    option.deserialize(Node(entries={"value": "2.5"}))
    assert option.value == 2.5


def test_double_select_rejects_text():
    option = DoubleSelect(key="value")
    with pytest.raises(ValueCoercionError):
        option.deserialize(Node(entries={"value": "lots"}))


def test_boolean_select():
    option = BooleanSelect(key="caster")
    option.deserialize(Node(entries={"caster": True}))
    assert option.value is True
    assert option.get_data() == {"caster": True}


def test_material_select():
    option = MaterialSelect()
    assert option.key == "material"
    assert option.get_summary() == "Dirt"

    option.deserialize(Node(entries={"material": "Stone"}))
    assert option.get_data() == {"material": "Stone"}

    option.deserialize(Node())
    assert option.material == "Dirt"


def test_set_tooltip_chains():
    option = StringSelect(key="a").set_tooltip("Shown on hover")
    assert option.tooltip == "Shown on hover"


def test_clone_is_independent():
    option = DoubleSelect(key="radius", value=3)
    copy = option.clone()
    copy.value = 10
    assert option.value == 3.0
    assert copy.key == "radius"


def test_validation():
    with pytest.raises(ValidationError):
        StringSelect(key="a", unknown=1)

    option = DoubleSelect(key="value")
    with pytest.raises(ValidationError):
        option.value = "not a number"


def test_base_option_is_abstract():
    with pytest.raises(TypeError):
        ComponentOption(key="a")
