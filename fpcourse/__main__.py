"""python -m fpcourse"""

from fpcourse.cli.main import run

if __name__ == "__main__":
    run()
