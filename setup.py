from setuptools import setup, find_packages

setup(
    name="trex",
    version="0.1.0",
    description="Render regular expressions as box-drawing diagrams in the terminal",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">=3.12",
)
