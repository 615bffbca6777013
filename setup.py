# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="cmdchallenge",
    version="1.0.0",
    description="In-memory virtual filesystem and shell for command-line treasure hunts",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["cmdchallenge*"]),
    python_requires=">=3.8",
    install_requires=[
        "customtkinter",  # Ventana de terminal (--gui)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'cmdchallenge=cmdchallenge.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
