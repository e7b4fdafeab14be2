from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from ganado.application.errors import ComputationFault, InvalidDepth, NotFound
from ganado.application.use_cases.genealogy import get_consanguinity, get_pedigree
from ganado.domain.models.animal import Animal


def make_animal(tag: str, sex: str = "H", sire=None, dam=None) -> Animal:
    return Animal.create(
        tag=tag,
        birth_date=date(2019, 5, 1),
        sex=sex,
        sire_id=sire.id if sire else None,
        dam_id=dam.id if dam else None,
    )


@pytest.fixture()
def half_sib_mating(uow):
    """Calf whose sire and dam share the same sire."""
    grandsire = make_animal("G-1", "M")
    sire = make_animal("S-1", "M", sire=grandsire)
    dam = make_animal("D-1", "H", sire=grandsire)
    calf = make_animal("K-1", "H", sire=sire, dam=dam)
    uow.animals.put(grandsire, sire, dam, calf)
    return calf


@pytest.mark.asyncio
@pytest.mark.parametrize("depth", [0, 6, -1])
async def test_pedigree_rejects_depth_before_lookup(uow, depth):
    with pytest.raises(InvalidDepth):
        await get_pedigree.execute(uow, uuid4(), depth)
    assert uow.animals.get_calls == 0


@pytest.mark.asyncio
async def test_pedigree_unknown_or_inactive_subject(uow):
    with pytest.raises(NotFound):
        await get_pedigree.execute(uow, uuid4(), 3)

    retired = make_animal("R-1")
    retired.active = False
    uow.animals.put(retired)
    with pytest.raises(NotFound):
        await get_pedigree.execute(uow, retired.id, 3)


@pytest.mark.asyncio
async def test_pedigree_without_parents_has_no_ancestors(uow):
    founder = make_animal("F-1")
    uow.animals.put(founder)

    for depth in range(1, 6):
        tree = await get_pedigree.execute(uow, founder.id, depth)
        assert tree.ancestors == []
        assert tree.depth == depth


@pytest.mark.asyncio
async def test_pedigree_depth_one_stops_at_subject(uow, half_sib_mating):
    tree = await get_pedigree.execute(uow, half_sib_mating.id, 1)
    assert tree.animal.id == half_sib_mating.id
    assert tree.ancestors == []


@pytest.mark.asyncio
async def test_pedigree_depth_three_has_parents_and_grandparents(uow, half_sib_mating):
    tree = await get_pedigree.execute(uow, half_sib_mating.id, 3)

    sire_node, dam_node = tree.ancestors
    assert sire_node.animal.tag == "S-1"
    assert dam_node.animal.tag == "D-1"
    assert sire_node.generation == dam_node.generation == 1
    assert sire_node.sire.animal.tag == "G-1"
    assert sire_node.sire.generation == 2
    assert dam_node.sire.animal.tag == "G-1"
    assert sire_node.dam is None


@pytest.mark.asyncio
async def test_pedigree_only_dam_known(uow):
    dam = make_animal("D-2")
    calf = make_animal("K-2", dam=dam)
    uow.animals.put(dam, calf)

    tree = await get_pedigree.execute(uow, calf.id, 2)

    assert [node.animal.tag for node in tree.ancestors] == ["D-2"]


@pytest.mark.asyncio
async def test_pedigree_lookup_failure_is_a_computation_fault(uow):
    calf = make_animal("K-3", sire=make_animal("S-3", "M"))
    uow.animals.put(calf)
    real_get = uow.animals.get

    async def flaky_get(animal_id):
        if animal_id == calf.id:
            return await real_get(animal_id)
        raise RuntimeError("connection reset")

    uow.animals.get = flaky_get
    with pytest.raises(ComputationFault):
        await get_pedigree.execute(uow, calf.id, 3)


@pytest.mark.asyncio
async def test_consanguinity_unknown_subject_is_not_found(uow):
    with pytest.raises(NotFound):
        await get_consanguinity.execute(uow, uuid4())


@pytest.mark.asyncio
async def test_consanguinity_without_shared_ancestors_is_zero(uow):
    sire, dam = make_animal("S-4", "M"), make_animal("D-4")
    calf = make_animal("K-4", sire=sire, dam=dam)
    uow.animals.put(sire, dam, calf)

    result = await get_consanguinity.execute(uow, calf.id)

    assert result.animal_id == calf.id
    assert result.name is None
    assert result.coefficient == Decimal(0)


@pytest.mark.asyncio
async def test_consanguinity_half_sib_mating(uow, half_sib_mating):
    result = await get_consanguinity.execute(uow, half_sib_mating.id)
    assert result.coefficient == Decimal("12.50")


@pytest.mark.asyncio
async def test_consanguinity_full_sib_mating(uow):
    grandsire, granddam = make_animal("G-5", "M"), make_animal("GD-5")
    sire = make_animal("S-5", "M", sire=grandsire, dam=granddam)
    dam = make_animal("D-5", sire=grandsire, dam=granddam)
    calf = make_animal("K-5", sire=sire, dam=dam)
    uow.animals.put(grandsire, granddam, sire, dam, calf)

    result = await get_consanguinity.execute(uow, calf.id)

    assert result.coefficient == Decimal("25.00")


@pytest.mark.asyncio
async def test_shallower_duplicate_increases_estimate(uow, half_sib_mating):
    before = (await get_consanguinity.execute(uow, half_sib_mating.id)).coefficient

    # Parent-offspring mating one level up: the sire is also the dam's dam's sire
    sire = uow.animals.items[half_sib_mating.sire_id]
    dam = uow.animals.items[half_sib_mating.dam_id]
    grand_dam = make_animal("GD-6", sire=sire)
    uow.animals.put(grand_dam)
    dam.dam_id = grand_dam.id

    after = (await get_consanguinity.execute(uow, half_sib_mating.id)).coefficient

    assert after > before


@pytest.mark.asyncio
async def test_consanguinity_terminates_on_cycles(uow):
    looped = make_animal("L-1", "M")
    looped.sire_id = looped.id
    uow.animals.put(looped)

    result = await get_consanguinity.execute(uow, looped.id, max_generation=5)

    assert result.coefficient == Decimal("50.00")


@pytest.mark.asyncio
async def test_consanguinity_lookup_failure_is_a_computation_fault(uow):
    calf = make_animal("K-7")
    uow.animals.put(calf)
    calls = 0
    real_get = uow.animals.get

    async def flaky_get(animal_id):
        nonlocal calls
        calls += 1
        if calls > 1:
            raise RuntimeError("connection reset")
        return await real_get(animal_id)

    uow.animals.get = flaky_get
    with pytest.raises(ComputationFault):
        await get_consanguinity.execute(uow, calf.id)
