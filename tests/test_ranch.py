from ranch.core.rng import RNG
from ranch.models.creature import Category, Creature, Sex
from ranch.models.ranch import Ranch


def make_ranch(notifier, *creatures, rng=None):
    ranch = Ranch(notifier=notifier, rng=rng or RNG(0))
    for c in creatures:
        ranch.add(c)
    return ranch


def test_new_ranch_is_empty(notifier):
    ranch = Ranch(notifier=notifier)
    assert len(ranch) == 0
    ranch.display_all()
    assert notifier.messages() == ["The ranch is empty."]


def test_add_appends_and_allows_duplicates(notifier):
    a = Creature("Evoli", Category.WATER, Sex.MALE)
    b = Creature("Evoli", Category.WATER, Sex.MALE)
    ranch = make_ranch(notifier, a, b)
    assert ranch.creatures == (a, b)
    assert ranch[1] is b


def test_display_all_prefixes_indices_with_dividers(notifier):
    ranch = make_ranch(
        notifier,
        Creature("Pikachu", Category.ELECTRIC, Sex.MALE),
        Creature("Bulbizarre", Category.PLANT, Sex.FEMALE),
    )
    ranch.display_all()
    lines = notifier.messages()
    divider = "-------------------------"
    assert lines[0] == divider
    assert lines[1] == "Index: 0"
    assert lines[2] == "Name   : Pikachu"
    assert lines[7] == divider
    assert lines[8] == "Index: 1"
    assert lines[9] == "Name   : Bulbizarre"
    assert lines[-1] == divider
    assert len(lines) == 2 * 7 + 1


def test_train_all_levels_every_creature(notifier):
    a = Creature("A", Category.FIRE, Sex.MALE)
    b = Creature("B", Category.FIRE, Sex.FEMALE, level=2, experience=60)
    ranch = make_ranch(notifier, a, b)
    ranch.train_all(150)
    assert (a.level, a.experience) == (2, 50)
    assert (b.level, b.experience) == (4, 10)
    assert len(notifier.events("level_up")) == 3


def test_breeding_by_index_appends_offspring(notifier):
    a = Creature("A", Category.FIRE, Sex.MALE, level=5)
    b = Creature("B", Category.FIRE, Sex.FEMALE, level=5)
    ranch = make_ranch(notifier, a, b)

    child = ranch.attempt_breeding_by_index(0, 1)

    assert len(ranch) == 3
    assert ranch[2] is child
    assert child.name == "Mystere"
    assert child.category is Category.FIRE
    assert child.level == 1 and child.experience == 0
    assert child.sex in (Sex.MALE, Sex.FEMALE)
    assert ranch[0] is a and ranch[1] is b


def test_breeding_by_index_fails_below_level_five(notifier):
    a = Creature("A", Category.FIRE, Sex.MALE, level=3)
    b = Creature("B", Category.FIRE, Sex.FEMALE, level=5)
    ranch = make_ranch(notifier, a, b)
    assert ranch.attempt_breeding_by_index(0, 1) is None
    assert len(ranch) == 2
    assert notifier.events("breeding_failed")


def test_breeding_same_index_fails(notifier):
    a = Creature("A", Category.FIRE, Sex.MALE, level=8)
    ranch = make_ranch(notifier, a)
    assert ranch.attempt_breeding_by_index(0, 0) is None
    assert len(ranch) == 1


def test_out_of_range_indices_leave_ranch_unchanged(notifier):
    a = Creature("A", Category.FIRE, Sex.MALE, level=5)
    b = Creature("B", Category.FIRE, Sex.FEMALE, level=5)
    ranch = make_ranch(notifier, a, b)
    before = ranch.creatures

    for i, j in [(0, 2), (2, 0), (5, 7), (-1, 0)]:
        assert ranch.attempt_breeding_by_index(i, j) is None

    assert ranch.creatures == before
    assert [e.kind for e in notifier.events()] == ["invalid_indices"] * 4
    assert notifier.messages()[0] == "Invalid indices for breeding."


def test_sort_by_level_is_stable_and_idempotent(notifier):
    a = Creature("a", Category.FIRE, Sex.MALE, level=3)
    b = Creature("b", Category.FIRE, Sex.MALE, level=1)
    c = Creature("c", Category.FIRE, Sex.MALE, level=3)
    d = Creature("d", Category.FIRE, Sex.MALE, level=1)
    ranch = make_ranch(notifier, a, b, c, d)

    ranch.sort_by_level()
    once = ranch.creatures
    assert [x.name for x in once] == ["b", "d", "a", "c"]

    ranch.sort_by_level()
    assert ranch.creatures == once
    assert notifier.messages() == ["The ranch has been sorted by level."] * 2


def test_ranch_uses_its_rng_for_offspring_sex(notifier, stub_rng):
    a = Creature("A", Category.PLANT, Sex.FEMALE, level=5)
    b = Creature("B", Category.PLANT, Sex.MALE, level=5)
    ranch = make_ranch(notifier, a, b, rng=stub_rng(False, True))
    assert ranch.attempt_breeding_by_index(0, 1).sex is Sex.FEMALE
    assert ranch.attempt_breeding_by_index(1, 0).sex is Sex.MALE
    assert len(ranch) == 4
