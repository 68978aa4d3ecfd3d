# setup.py
from setuptools import setup, find_packages

setup(
    name="basicmath",
    version="1.0.0",
    description="BasicMath numeric kernel: Vec3 (float32/float64), interpolation, GCD",
    packages=find_packages(include=["basicmath", "basicmath.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
