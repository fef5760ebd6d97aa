# setup.py
from setuptools import setup, find_packages

setup(
    name="glisp",
    version="0.1.0",
    description="An embeddable, homoiconic scripting language with multiple dispatch",
    packages=find_packages(include=["glisp", "glisp.*"]),
    package_data={"glisp": ["modules/lib/*.glisp"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
