from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="zkposeidon",
    version="0.1.0",
    author="zkposeidon contributors",
    description="Poseidon permutation and 2:1 hash with R1CS gadgets over BN254",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["zkposeidon", "zkposeidon.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Security :: Cryptography",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.11",
    install_requires=[
        "py-ecc>=6.0.0",
        "pycryptodome>=3.19.0",
        "pydantic>=2.5.0",
        "click>=8.1.0",
        "python-dotenv>=1.0.0",
        "colorlog>=6.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "zkposeidon=zkposeidon.cli.main:cli",
        ],
    },
)
