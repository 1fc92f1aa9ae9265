"""演示用随机数据"""
from __future__ import annotations
import random
import string
from csv_record_writer.models import Month, Person, Sample, Student

FIRST_NAMES = [
    "Ann", "Boris", "Clara", "Dmitri", "Elena", "Felix", "Greta", "Hugo",
    "Irina", "Jonas", "Katya", "Leo", "Maria", "Nikolai", "Olga", "Pavel",
]

LAST_NAMES = [
    "Lee", "Ivanov", "Smith", "Petrova", "Novak", "Keller", "Moreau", "Sato",
    "Fischer", "Orlov", "Silva", "Berg", "Kowalski", "Dubois",
]

CHARACTERS = [
    "Totoro", "Chihiro", "Haku", "No-Face", "Kiki", "Jiji", "Howl", "Sophie",
    "Calcifer", "San", "Ashitaka", "Ponyo", "Sosuke", "Nausicaa", "Porco Rosso",
]

SCORE_COUNT = 11


def _asin(rng: random.Random) -> str:
    return "B0" + "".join(rng.choices(string.ascii_uppercase + string.digits, k=8))


def make_persons(n: int, rng: random.Random) -> list[Person]:
    months = list(Month)
    return [
        Person(
            first_name=rng.choice(FIRST_NAMES),
            last_name=rng.choice(LAST_NAMES),
            day_of_birth=rng.randint(1, 30),
            month_of_birth=rng.choice(months),
            year_of_birth=rng.randint(1900, 2024),
        )
        for _ in range(n)
    ]


def make_students(n: int, rng: random.Random) -> list[Student]:
    # 所有学生共用同一组成绩，各自持有副本
    scores = [str(rng.randrange(5)) for _ in range(SCORE_COUNT)]
    return [
        Student(
            name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
            score=list(scores),
        )
        for _ in range(n)
    ]


def make_samples(n: int, rng: random.Random) -> list[Sample]:
    samples = []
    for _ in range(n):
        mapping = {}
        for _ in range(5):
            # 键可能重复，与 dict 语义一致：后写覆盖
            mapping[f"key_{rng.choice(FIRST_NAMES)}"] = f"value_{_asin(rng)}"
        samples.append(Sample(
            strings=tuple(rng.choice(CHARACTERS) for _ in range(5)),
            doubles=tuple(round(rng.uniform(1, 500), 1) for _ in range(5)),
            set={rng.randint(100, 999) for _ in range(5)},
            map=mapping,
        ))
    return samples
