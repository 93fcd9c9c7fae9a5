import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pngc",
    version="0.0.1",
    author="Gianluca Pacchiella",
    author_email="gp@ktln2.org",
    description="Hide messages inside PNG chunks",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/gipi/pngc",
    packages=setuptools.find_packages(exclude=["tests"]),
    scripts=["scripts/pngc.py"],
    install_requires=[
        'bitstring>=4.0,<6',
    ],
    extras_require={
        'tests': [
            'pytest',
            'pillow',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GPLv2 License",
        "Operating System :: OS Independent",
    ],
)
