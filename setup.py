import setuptools


with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="expmapping",
    version="0.1.0",
    description="Value to bucket index mappings for base-2 exponential histograms",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    package_data={"expmapping": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
    ],
    keywords=["histogram", "exponential histogram", "metrics"],
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.7",
)
