# setup.py
from setuptools import setup, find_packages

setup(
    name="mallet",
    version="0.1.0",
    description="A tree-walking interpreter for a small Lisp with macros and tail calls",
    packages=find_packages(include=["mallet", "mallet.*"]),
    package_data={"mallet": ["prelude/*.mal"]},
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mallet = mallet.repl:main"],
    },
    zip_safe=False,
)
