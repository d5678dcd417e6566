from setuptools import setup, find_packages

setup(
    name="stop-routing",
    version="0.1.0",
    description="Distance-vector routing tables for the stops of a transport network.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
)
