# setup.py
from setuptools import setup, find_packages

setup(
    name="pathtree",
    version="1.0.0",
    description="Path string algebra, recursive directory trees and depth-sorted file listings",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'pathtree=pathtree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
