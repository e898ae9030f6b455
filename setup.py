from setuptools import setup


def setup_package():
    # metadata and dependencies are declared in setup.cfg
    setup()


if __name__ == "__main__":
    setup_package()
