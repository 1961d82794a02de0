# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirtree",
    version="0.1.1",
    description="Render directory hierarchies as indented trees, like the classic tree command",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirtree", "dirtree.*"]),
    python_requires=">=3.8",
    install_requires=[
        "rich",  # Colored terminal output
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirtree=dirtree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
