from setuptools import find_packages, setup

setup(
    name="random-nft",
    version="0.1.0",
    packages=find_packages(include=["random_nft", "random_nft.*"]),
    python_requires=">=3.11",
    entry_points={
        "console_scripts": [
            "random-nft=random_nft.main:cli_entrypoint",
        ],
    },
    install_requires=[
        "click>=8.1",
        "pydantic>=2.7",
        "pyyaml>=6.0",
        "typing-extensions>=4.12",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
)
