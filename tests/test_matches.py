# tests/test_matches.py
from tests.fixtures import MatchTestBase, MockItem, make_shield, make_sword
from dungeon.game.name import name_from_singular
from dungeon.utils.matches import Matches

class TestMatchesConstruction(MatchTestBase):

    def test_from_collection_keeps_size_and_order(self):
        """Conversion copies every element in iteration order."""
        matches = Matches.from_collection(self.room_items, True)
        self.assertEqual(matches.size(), 3)
        self.assertEqual(len(matches), 3)
        self.assertEqual(matches.to_list(), self.room_items)
        for i, item in enumerate(self.room_items):
            self.assertIs(matches.get(i), item)

    def test_from_collection_accepts_any_iterable(self):
        matches = Matches.from_collection(item for item in self.room_items)
        self.assertEqual(matches.to_list(), self.room_items)

        swords = Matches.from_collection((self.iron_sword, self.other_iron_sword))
        self.assertEqual(swords.size(), 2)

    def test_disjoint_defaults_to_true(self):
        self.assertTrue(Matches.from_collection(self.room_items).is_disjoint())
        self.assertTrue(Matches().is_disjoint())

    def test_disjoint_flag_is_kept(self):
        for flag in (True, False):
            matches = Matches.from_collection(self.room_items, flag)
            self.assertEqual(matches.is_disjoint(), flag)
            self.assertEqual(matches.disjoint, flag)

    def test_disjoint_unaffected_by_add(self):
        matches = Matches.from_collection([], False)
        matches.add(self.iron_sword)
        matches.add(self.wood_shield)
        self.assertFalse(matches.is_disjoint())

    def test_disjoint_is_read_only(self):
        matches = Matches()
        with self.assertRaises(AttributeError):
            matches.disjoint = False # type: ignore

    def test_empty_collection(self):
        """Zero matches is a valid state."""
        matches = Matches.from_collection([])
        self.assertEqual(matches.size(), 0)
        self.assertEqual(matches.get_different_names(), 0)
        self.assertFalse(matches)
        with self.assertRaises(IndexError):
            matches.get(0)

class TestMatchesReads(MatchTestBase):

    def setUp(self):
        super().setUp()
        self.matches = Matches.from_collection(self.room_items, True)

    def test_scenario_swords_and_shield(self):
        self.assertEqual(self.matches.size(), 3)
        self.assertEqual(self.matches.get_different_names(), 2)
        self.assertTrue(self.matches.has_match_with_name(name_from_singular("wood shield")))
        self.assertFalse(self.matches.has_match_with_name(name_from_singular("gold shield")))

    def test_has_match_with_name_uses_value_equality(self):
        """A freshly built Name equal in content finds the match."""
        self.assertTrue(self.matches.has_match_with_name(name_from_singular("iron sword")))

    def test_has_match_with_name_on_empty(self):
        self.assertFalse(Matches().has_match_with_name(name_from_singular("iron sword")))

    def test_get_out_of_range(self):
        with self.assertRaises(IndexError):
            self.matches.get(3)
        with self.assertRaises(IndexError):
            self.matches.get(-1)

    def test_to_list_is_a_copy(self):
        """Mutating the returned list leaves the matches untouched."""
        copy = self.matches.to_list()
        copy.clear()
        copy.append(make_shield("gold"))

        self.assertEqual(self.matches.size(), 3)
        self.assertIs(self.matches.get(0), self.iron_sword)
        self.assertIs(self.matches.get(2), self.wood_shield)
        self.assertEqual(self.matches.get_different_names(), 2)

    def test_iteration_follows_insertion_order(self):
        self.assertEqual(list(self.matches), self.room_items)

class TestDifferentNamesCache(MatchTestBase):

    def test_add_invalidates_count(self):
        matches = Matches.from_collection([self.iron_sword])
        self.assertEqual(matches.get_different_names(), 1)

        matches.add(self.wood_shield)
        self.assertEqual(matches.get_different_names(), 2)

    def test_add_duplicate_name_keeps_count(self):
        matches = Matches.from_collection([self.iron_sword])
        self.assertEqual(matches.get_different_names(), 1)

        matches.add(self.other_iron_sword)
        self.assertEqual(matches.size(), 2)
        self.assertEqual(matches.get_different_names(), 1)

    def test_repeated_reads_are_stable(self):
        matches = Matches()
        expected_names = set()
        for material in ["iron", "wood", "iron", "steel", "wood"]:
            sword = make_sword(material)
            matches.add(sword)
            expected_names.add(sword.name)
            for _ in range(3):
                self.assertEqual(matches.get_different_names(), len(expected_names))

    def test_count_not_recomputed_without_mutation(self):
        """A second read returns the stored value without walking the matches."""
        matches = Matches.from_collection(self.room_items)
        self.assertEqual(matches.get_different_names(), 2)

        # Swap a name behind the container's back; the cached count must not notice.
        self.iron_sword.name = name_from_singular("gold sword")
        self.assertEqual(matches.get_different_names(), 2)

        matches.add(make_sword("steel"))
        self.assertEqual(matches.get_different_names(), 4)

    def test_same_item_added_twice(self):
        matches = Matches()
        matches.add(self.iron_sword)
        matches.add(self.iron_sword)
        self.assertEqual(matches.size(), 2)
        self.assertEqual(matches.get_different_names(), 1)

    def test_distinct_entities_share_name(self):
        one = MockItem(name_from_singular("torch"), "torch_1")
        two = MockItem(name_from_singular("torch"), "torch_2")
        matches = Matches.from_collection([one, two])
        self.assertEqual(matches.get_different_names(), 1)
        self.assertIs(matches.get(1), two)
