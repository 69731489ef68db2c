from setuptools import setup, find_packages

setup(
    name="nordea-ynab",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "nordea-ynab=nordea_ynab.convert:main",
        ],
    },
    description="Convert Nordea CSV exports into YNAB imports, skipping already processed transactions",
    python_requires=">=3.8",
)
