"""
This is the main file to run the game.
It imports the run function from the wall_invaders app and runs it.
"""

from wall_invaders.app import run

if __name__ == "__main__":
    run()
