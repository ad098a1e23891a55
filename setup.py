# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="design-tokens",
    version="1.0.0",
    description="Transform design tokens from JSON to CSS variables",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["design_tokens*"]),
    package_data={"design_tokens.interface.locales": ["*.json"]},
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'design-tokens=design_tokens.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
