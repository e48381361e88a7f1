import pytest

from comlab.components import (
    Component1,
    Component2,
    Component3,
    create_component1,
    create_component2,
    create_component3,
)
from comlab.interfaces import IID_IUNKNOWN, IID_IX, IID_IY, IID_IZ, NoInterfaceError


def lines(capsys):
    return capsys.readouterr().out.splitlines()


@pytest.mark.parametrize(
    "factory, cls",
    [
        (create_component1, Component1),
        (create_component2, Component2),
        (create_component3, Component3),
    ],
)
def test_factory_returns_component_with_one_reference(factory, cls):
    component = factory()
    assert type(component) is cls
    assert component.ref_count == 1
    assert component.destroyed is False


def test_query_unknown_returns_same_object_and_adds_ref(capsys):
    component = create_component1()
    result = component.query_interface(IID_IUNKNOWN)
    assert result is component
    assert component.ref_count == 2
    assert lines(capsys) == ["Component 1:\tReturn pointer to IUnknown."]


def test_component1_supports_ix(capsys):
    component = create_component1()
    ix = component.query_interface(IID_IX)
    ix.fx()
    assert lines(capsys) == ["Component 1:\tReturn pointer to IX.", "Fx"]


@pytest.mark.parametrize("iid", [IID_IY, IID_IZ])
def test_component1_rejects_other_interfaces(capsys, iid):
    component = create_component1()
    with pytest.raises(NoInterfaceError) as info:
        component.query_interface(iid)
    assert info.value.iid == iid
    assert component.ref_count == 1
    assert lines(capsys) == ["Component 1:\tInterface not supported."]


def test_component2_supports_ix_and_iy(capsys):
    component = create_component2()
    component.query_interface(IID_IX).fx()
    component.query_interface(IID_IY).fy()
    assert component.ref_count == 3
    assert lines(capsys) == [
        "Component 2:\tReturn pointer to IX.",
        "Fx from Component 2",
        "Component 2:\tReturn pointer to IY.",
        "Fy from Component 2",
    ]


def test_component2_rejects_iz(capsys):
    component = create_component2()
    with pytest.raises(NoInterfaceError):
        component.query_interface(IID_IZ)
    assert lines(capsys) == ["Component 2:\tInterface not supported."]


def test_component3_supports_all(capsys):
    component = create_component3()
    component.query_interface(IID_IX).fx()
    component.query_interface(IID_IY).fy()
    component.query_interface(IID_IZ).fz()
    assert lines(capsys) == [
        "Component 3:\tReturn pointer to IX.",
        "Fx from Component 3",
        "Component 3:\tReturn pointer to IY.",
        "Fy from Component 3",
        "Component 3:\tReturn pointer to IZ.",
        "Fz from Component 3",
    ]


def test_release_counts_down_and_destroys(capsys):
    component = create_component2()
    component.query_interface(IID_IX)
    capsys.readouterr()
    assert component.release() == 1
    assert component.destroyed is False
    assert lines(capsys) == []
    assert component.release() == 0
    assert component.destroyed is True
    assert lines(capsys) == ["Component 2:\tDestroy self."]


def test_add_ref_and_release_are_balanced():
    component = create_component3()
    counts = [component.add_ref() for _ in range(3)]
    assert counts == [2, 3, 4]
    assert [component.release() for _ in range(4)] == [3, 2, 1, 0]


def test_use_after_destroy_raises():
    component = create_component1()
    component.release()
    with pytest.raises(RuntimeError):
        component.release()
    with pytest.raises(RuntimeError):
        component.add_ref()


def test_release_without_reference_raises():
    component = Component1()
    with pytest.raises(RuntimeError):
        component.release()
    assert component.ref_count == 0