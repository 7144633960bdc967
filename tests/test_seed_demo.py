from pymongo import UpdateOne

from dealfinder.jobs.seed_demo import demo_deals, seed


def test_demo_deals_use_negative_discounts() -> None:
    deals = demo_deals()
    assert {d["category"] for d in deals} == {1, 2}
    assert all(d["percent"] < 0 for d in deals)
    assert all(d["priceNew"] < d["priceOld"] for d in deals)


def test_seed_upserts_and_indexes(deals_collection) -> None:
    count = seed(deals_collection, drop=True)
    assert count == len(demo_deals())
    assert deals_collection.docs == []
    assert all(isinstance(op, UpdateOne) for op in deals_collection.writes)
    assert [name for _, name in deals_collection.indexes] == ["name_text", "category_1", "priceNew_1"]
