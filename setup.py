from setuptools import setup

setup(
    name="tigerstring",
    version="1.0.0",
    author="Kashif Razzaqui",
    author_email="kashif.razzaqui@gmail.com",
    description=(
        "A growable byte buffer for accumulating compiler output. "
        "Provides TigerString, which amortises appends by growing its cffi-backed storage 1.5x, "
        "and a process-wide accumulator for a single writer."
    ),
    packages=["tigerstring"],
    python_requires=">=3.8",
    install_requires=["cffi>=1.15.0"],
)
