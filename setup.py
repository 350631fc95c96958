# setup.py
from setuptools import setup, find_packages

setup(
    name="monlox",
    version="0.1.0",
    description="Tree-walking evaluator for the Monlox scripting language",
    packages=find_packages(include=["monlox", "monlox.*"]),
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "monlox = monlox.__main__:main",
        ],
    },
    zip_safe=False,
)
