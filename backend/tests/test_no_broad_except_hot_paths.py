from pathlib import Path
import unittest


PACKAGE = Path(__file__).resolve().parents[1] / "microchess"
HOT_PATHS = [
    PACKAGE / "core" / "legality.py",
    PACKAGE / "core" / "game.py",
    PACKAGE / "evaluate.py",
    PACKAGE / "engine.py",
]


class TestNoBroadExceptHotPaths(unittest.TestCase):
    def test_no_broad_catches_in_hot_paths(self):
        violations = []
        for path in HOT_PATHS:
            content = path.read_text(encoding="utf-8")
            for needle in ("except Exception", "except BaseException", "except:"):
                idx = 0
                while True:
                    idx = content.find(needle, idx)
                    if idx < 0:
                        break
                    line = content.count("\n", 0, idx) + 1
                    violations.append(f"{path.relative_to(PACKAGE)}:{line}")
                    idx += 1
        self.assertEqual(
            violations,
            [],
            msg="Broad except guard failed for hot paths: " + ", ".join(violations),
        )


if __name__ == "__main__":
    unittest.main()
