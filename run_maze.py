#!/usr/bin/env python3
# run_maze.py - Menu and command line for generating, saving and solving mazes

import argparse
import sys

from maze_config import DEFAULT_DIMENSION
from maze_errors import MazeError
from maze_session import MazeSession


def print_menu(session):
    print("=== Menu ===")
    print("1. Generate a new maze")
    print("2. Load a maze")
    if session.has_maze:
        print("3. Save the maze")
        print("4. Display the maze")
        print("5. Find the escape")
    print("0. Exit")


def read_size():
    text = input().strip()
    try:
        return int(text)
    except ValueError:
        # let the generator report it as an invalid size
        return text


def run_menu(session=None):
    """Interactive loop; errors are reported and the menu is shown again"""
    session = session or MazeSession()
    while True:
        print_menu(session)
        choice = input().strip()

        try:
            if choice == '1':
                print("Enter the size of a new maze")
                session.generate(read_size())
                print(session.draw())
            elif choice == '2':
                session.load(input().strip())
            elif choice == '3' and session.has_maze:
                session.save(input().strip())
            elif choice == '4' and session.has_maze:
                print(session.draw())
            elif choice == '5' and session.has_maze:
                session.solve()
                print(session.draw(show_solution=True))
            elif choice == '0':
                break
            else:
                print("Incorrect option. Please try again")
        except MazeError as e:
            print(e)

    print("Bye!")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Generate, load, save and solve mazes')
    parser.add_argument('--size', type=int, help=f'Generate a new size x size maze (default {DEFAULT_DIMENSION})')
    parser.add_argument('--load', type=str, help='Load a maze from file')
    parser.add_argument('--save', type=str, help='Save the maze to file')
    parser.add_argument('--solve', action='store_true', help='Find and display the escape path')
    parser.add_argument('--seed', type=int, help='Random seed for reproducible mazes')
    parser.add_argument('--menu', action='store_true', help='Run the interactive menu')

    args = parser.parse_args(argv)

    session = MazeSession()
    actions = (args.size, args.load, args.save)
    if args.menu or (all(a is None for a in actions) and not args.solve):
        run_menu(session)
        return 0

    try:
        if args.load:
            print(f"Loading maze from {args.load}")
            session.load(args.load)
        else:
            size = args.size if args.size is not None else DEFAULT_DIMENSION
            session.generate(size, seed=args.seed)

        if args.solve:
            path = session.solve()
            print(session.draw(show_solution=True))
            print(f"Path length: {len(path)} cells")
        else:
            print(session.draw())

        if args.save:
            session.save(args.save)

    except MazeError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
