from setuptools import setup, find_packages

setup(
    name="fourinarow",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run"],
    package_data={
        "fourinarow.interfaces": ["templates/*.html", "static/*"],
    },
    install_requires=[
        "numpy",
        "flask",
        "blinker",  # signals between the game and its renderers
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["fourinarow=run:main"],
    },
)
