from setuptools import setup, find_packages

setup(
    name="webharness",
    version="1.0.0",
    description="A Page-Object-Model browser test harness with a wait-guarded Selenium facade",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "selenium>=4.10.0",
        "webdriver-manager>=3.5.2",
        "openpyxl>=3.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
