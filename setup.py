from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    readme = f.read()

setup(
    name="osmxml",
    license="GPL v3",
    version="1.0.0",
    description="Strict decoding of OpenStreetMap XML into typed elements",
    long_description=readme,
    long_description_content_type="text/markdown",
    author="Mikołaj Kuranowski",
    keywords="osm openstreetmap xml parser",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Scientific/Engineering :: GIS",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: Markup :: XML",
    ],
    packages=find_packages(include=["osmxml", "osmxml.*"]),
    package_data={"osmxml": ["test_fixtures/*"]},
    python_requires=">=3.8, <4",
    install_requires=["typing_extensions"],
    extras_require={"test": ["pytest"]},
)
