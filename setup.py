# setup.py
from setuptools import setup, find_packages

setup(
    name="nananiji-calculator",
    version="0.1.0",
    description="Express any integer with + - * / over the digits of a seed number",
    author="nananiji-calculator contributors",
    package_dir={"": "src"},
    packages=find_packages(where="src"),      # automatically finds your modules
    install_requires=[
        "pandas>=2.3.0",
        "numpy",
        "rich",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["nananiji=nananiji.cli:main"],
    },
    python_requires=">=3.10",
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
