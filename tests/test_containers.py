from ferrule.lessons.containers import (
    Fruit,
    array_and_vec,
    fill_fruit_basket,
    fruit_basket,
    vec_loop,
)


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v
    assert a == (10, 20, 30, 40)


def test_vec_loop():
    v = [x for x in range(1, 11) if x % 2 == 0][:5]
    assert vec_loop(v) == [4, 8, 12, 16, 20]


def test_vec_loop_empty():
    assert vec_loop([]) == []


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def test_basket_keeps_given_bananas():
    assert fruit_basket()["banana"] == 2


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LICHI: 5}


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LICHI] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert len(basket) == 5


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11