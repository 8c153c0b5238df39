import unittest
from memspace.memory.block import MemoryBlock


class TestMemoryBlock(unittest.TestCase):

    def test_value_equality(self):
        self.assertEqual(MemoryBlock(3, 4), MemoryBlock(3, 4))
        self.assertNotEqual(MemoryBlock(3, 4), MemoryBlock(3, 5))
        self.assertNotEqual(MemoryBlock(3, 4), MemoryBlock(4, 4))
        self.assertNotEqual(MemoryBlock(3, 4), (3, 4))

    def test_unhashable(self):
        """Mutable con igualdad por valor: no puede ir en sets/dicts."""
        with self.assertRaises(TypeError):
            hash(MemoryBlock(0, 1))

    def test_rendering(self):
        self.assertEqual(str(MemoryBlock(250, 17)), "(250,17)")
        self.assertEqual(repr(MemoryBlock(250, 17)), "MemoryBlock(250, 17)")

    def test_end_and_adjacency(self):
        a = MemoryBlock(0, 10)
        b = MemoryBlock(10, 5)
        self.assertEqual(a.end, 10)
        self.assertTrue(a.is_adjacent_to(b))
        self.assertFalse(b.is_adjacent_to(a))

    def test_mutation_in_place(self):
        block = MemoryBlock(250, 20)
        block.base_address += 17
        block.length -= 17
        self.assertEqual(block, MemoryBlock(267, 3))

    def test_negative_fields_rejected(self):
        with self.assertRaises(ValueError):
            MemoryBlock(-1, 4)
        with self.assertRaises(ValueError):
            MemoryBlock(0, -4)


if __name__ == '__main__':
    unittest.main()
