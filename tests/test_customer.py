from routemin.customer import Customer


def make_customer():
    return Customer(id=7, x=1.5, y=2.5, demand=3.0, e=10.0, l=20.0, s=4.0)


def test_new_customer_is_ejected():
    c = make_customer()
    assert c.is_ejected() is True
    assert c.idx == -1


def test_customer_in_route_is_not_ejected():
    c = make_customer()
    c.route = [c]
    c.idx = 0
    assert c.is_ejected() is False


def test_dup_copies_data_and_detaches():
    c = make_customer()
    c.route = [c]
    c.idx = 0
    c.demand_pf = 5.0
    d = c.dup()
    assert d is not c
    assert (d.id, d.x, d.y, d.demand, d.e, d.l, d.s) == (
        c.id,
        c.x,
        c.y,
        c.demand,
        c.e,
        c.l,
        c.s,
    )
    assert d.demand_pf == c.demand_pf
    assert d.route is None
    assert d.idx == -1
    assert d.is_ejected() is True
    assert c.is_ejected() is False


def test_dup_is_independent():
    c = make_customer()
    d = c.dup()
    d.demand = 99.0
    assert c.demand == 3.0


def test_customers_compare_by_identity():
    c = make_customer()
    assert c.dup() != c
    assert c == c