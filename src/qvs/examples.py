"""
Example documents for demos and tests.

Builds a small "people" document with mixed value kinds so that
slicing, truthiness and coercion all have something to work on.
"""
from qvs.values import NULL, Array, Boolean, Number, Object, String


def build_example_people(count: int = 5) -> Object:
    people = []
    for i in range(count):
        # Every third person has no email
        email = NULL if i % 3 == 2 else String(f"person{i}@example.com")
        people.append(Object({
            "name": String(f"person{i}"),
            "age": Number(20 + i * 7),
            "active": Boolean(i % 2 == 0),
            "email": email,
            "tags": Array(tuple(String(t) for t in ("a", "b", "c")[: i % 4])),
        }))

    return Object({
        "people": Array(tuple(people)),
        "scores": Array(tuple(Number(float(s)) for s in range(count))),
        "meta": Object({}),
    })
