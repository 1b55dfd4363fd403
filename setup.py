from setuptools import setup, find_packages

setup(
    name="connect4-gui",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run"],
    install_requires=[
        "numpy",
        "pygame",  # Window, drawing and input events
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4-gui=run:main",
        ],
    },
)
