from setuptools import find_packages, setup

package_name = "bfsmaze"


def read_requirements():
    with open("requirements.txt", "r") as file:
        return [
            line.strip() for line in file if line.strip() and not line.startswith("#")
        ]


setup(
    name=package_name,
    version="0.1.0",
    packages=find_packages(
        exclude=["tests", "tests.*"]
    ),  # Exclude tests and subpackages
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    zip_safe=True,
    description="Breadth-first maze solver that floods a grid from every entrance and marks the leftmost shortest path",
    license="MIT",
    tests_require=["pytest"],
    entry_points={
        "console_scripts": ["bfsmaze=bfsmaze.main:app"],
    },
)
