from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

from ganado.domain.models.animal import Animal


def make_animal(tag: str, sex: str = "H", sire=None, dam=None, active: bool = True) -> Animal:
    animal = Animal.create(
        tag=tag,
        name=f"Name {tag}",
        birth_date=date(2018, 2, 1),
        sex=sex,
        breed="Brahman",
        status="Activo",
        sire_id=sire.id if sire else None,
        dam_id=dam.id if dam else None,
    )
    animal.active = active
    return animal


async def seed_half_sib_mating(seed) -> Animal:
    grandsire = make_animal("G-1", "M")
    sire = make_animal("S-1", "M", sire=grandsire)
    dam = make_animal("D-1", "H", sire=grandsire)
    calf = make_animal("K-1", "H", sire=sire, dam=dam)
    await seed(animals=[grandsire, sire, dam, calf])
    return calf


async def test_pedigree_tree(client, seed):
    calf = await seed_half_sib_mating(seed)

    response = await client.get(f"/api/v1/genealogy/{calf.id}/pedigree", params={"depth": 3})

    assert response.status_code == 200
    body = response.json()
    assert body["animal"]["tag"] == "K-1"
    assert body["depth"] == 3
    assert "generated_at" in body
    sire_node, dam_node = body["ancestors"]
    assert sire_node["animal"]["tag"] == "S-1"
    assert sire_node["generation"] == 1
    assert sire_node["sire"]["animal"]["tag"] == "G-1"
    assert sire_node["sire"]["generation"] == 2
    assert sire_node["sire"]["sire"] is None
    assert dam_node["sire"]["animal"]["id"] == sire_node["sire"]["animal"]["id"]


async def test_pedigree_default_depth(client, seed):
    calf = await seed_half_sib_mating(seed)

    response = await client.get(f"/api/v1/genealogy/{calf.id}/pedigree")

    assert response.status_code == 200
    assert response.json()["depth"] == 3


async def test_pedigree_invalid_depth(client, seed):
    calf = await seed_half_sib_mating(seed)

    for depth in (0, 6):
        response = await client.get(
            f"/api/v1/genealogy/{calf.id}/pedigree", params={"depth": depth}
        )
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_depth"


async def test_pedigree_inactive_subject(client, seed):
    retired = make_animal("R-1", active=False)
    await seed(animals=[retired])

    response = await client.get(f"/api/v1/genealogy/{retired.id}/pedigree")

    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


async def test_consanguinity(client, seed):
    calf = await seed_half_sib_mating(seed)

    response = await client.get(f"/api/v1/genealogy/{calf.id}/consanguinity")

    assert response.status_code == 200
    body = response.json()
    assert body["animal_id"] == str(calf.id)
    assert body["name"] == "Name K-1"
    assert Decimal(str(body["coefficient"])) == Decimal("12.50")
    assert "computed_at" in body


async def test_consanguinity_unrelated_parents(client, seed):
    sire, dam = make_animal("S-2", "M"), make_animal("D-2")
    calf = make_animal("K-2", sire=sire, dam=dam)
    await seed(animals=[sire, dam, calf])

    response = await client.get(f"/api/v1/genealogy/{calf.id}/consanguinity")

    assert response.status_code == 200
    assert Decimal(str(response.json()["coefficient"])) == Decimal(0)


async def test_consanguinity_unknown_animal(client):
    response = await client.get(f"/api/v1/genealogy/{uuid4()}/consanguinity")

    assert response.status_code == 404
    assert response.json() == {"code": "not_found", "message": "Animal not found or inactive"}
