import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from maze_session import MazeSession
from run_maze import main, run_menu


def run_with_input(lines, session=None):
    out = io.StringIO()
    with patch('builtins.input', side_effect=lines), redirect_stdout(out):
        run_menu(session)
    return out.getvalue()


class TestMenu(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def test_exit(self):
        output = run_with_input(['0'])
        self.assertIn("=== Menu ===", output)
        self.assertNotIn("3. Save the maze", output)
        self.assertTrue(output.rstrip().endswith("Bye!"))

    def test_incorrect_option(self):
        output = run_with_input(['9', 'x', '0'])
        self.assertEqual(output.count("Incorrect option. Please try again"), 2)

    def test_maze_options_hidden_until_generated(self):
        output = run_with_input(['3', '5', '0'])
        self.assertEqual(output.count("Incorrect option. Please try again"), 2)

    def test_generate_and_solve(self):
        session = MazeSession()
        output = run_with_input(['1', '7', '4', '5', '0'], session)
        self.assertIn("Enter the size of a new maze", output)
        self.assertIn("5. Find the escape", output)
        self.assertIn("//", output)
        self.assertEqual(session.grid.width, 7)

    def test_bad_size_reported(self):
        session = MazeSession()
        output = run_with_input(['1', '2', '1', 'abc', '0'], session)
        self.assertIn("at least 3", output)
        self.assertIn("must be an integer", output)
        self.assertFalse(session.has_maze)

    def test_load_missing_file(self):
        missing = os.path.join(self.tmp.name, 'missing.txt')
        output = run_with_input(['2', missing, '0'])
        self.assertIn(f"The file {missing} does not exist", output)

    def test_save_and_load(self):
        path = os.path.join(self.tmp.name, 'maze.txt')
        session = MazeSession()
        run_with_input(['1', '9', '3', path, '0'], session)
        self.assertTrue(os.path.exists(path))

        other = MazeSession()
        run_with_input(['2', path, '0'], other)
        self.assertEqual(other.grid, session.grid)


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_generate_solve_and_save(self):
        path = os.path.join(self.tmp.name, 'maze.txt')
        code, output = self.run_main(['--size', '9', '--seed', '3', '--solve', '--save', path])
        self.assertEqual(code, 0)
        self.assertIn("Path length:", output)
        self.assertTrue(os.path.exists(path))

    def test_seed_is_reproducible(self):
        _, first = self.run_main(['--size', '11', '--seed', '8'])
        _, second = self.run_main(['--size', '11', '--seed', '8'])
        self.assertEqual(first, second)

    def test_load_and_solve(self):
        path = os.path.join(self.tmp.name, 'open.txt')
        with open(path, 'w') as f:
            f.write("p p p\np w p\np p p\n")
        code, output = self.run_main(['--load', path, '--solve'])
        self.assertEqual(code, 0)
        self.assertIn("Path length: 3 cells", output)

    def test_errors_give_exit_code(self):
        code, output = self.run_main(['--size', '2'])
        self.assertEqual(code, 1)
        self.assertIn("Error:", output)
        code, _ = self.run_main(['--load', os.path.join(self.tmp.name, 'nope.txt')])
        self.assertEqual(code, 1)

    def test_no_action_runs_menu(self):
        with patch('builtins.input', side_effect=['0']):
            code, output = self.run_main([])
        self.assertEqual(code, 0)
        self.assertIn("Bye!", output)


if __name__ == '__main__':
    unittest.main()
