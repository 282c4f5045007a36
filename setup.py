from setuptools import setup, find_packages

setup(
    name="dummygen",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["Pillow", "openpyxl"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "dummygen = dummygen.cli:main",
        ]
    },
)
