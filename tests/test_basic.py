import unittest
from passmeter import Category, MeterOptions, classify

class TestPassmeter(unittest.TestCase):
    def test_default_options(self):
        options = MeterOptions()
        self.assertIsNone(options.custom_rules)
        self.assertFalse(options.is_custom)
    
    def test_classify_strong(self):
        result = classify("Abcdefg1!")
        self.assertEqual(result.category, Category.STRONG)
        self.assertEqual(result.message, "")

if __name__ == "__main__":
    unittest.main()
