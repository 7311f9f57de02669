from setuptools import setup, find_packages

setup(
    name="arabswitch",
    version="0.1.0",
    description="ArabSwitch — convert selected text between QWERTY and Arabic (102) AZERTY layouts",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "python-xlib",
        "PyQt5",
        "pyperclip",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "arabswitch=arabswitch.main:main",
        ],
    },
)
