import sys
from setuptools import setup

APP = ['sorter_gui.py']  # Desktop entry point for the app bundle
DATA_FILES = []
OPTIONS = {
    'argv_emulation': True,
    'packages': [],
}

extra = {}
if 'py2app' in sys.argv:
    extra = dict(
        app=APP,
        data_files=DATA_FILES,
        options={'py2app': OPTIONS},
        setup_requires=['py2app'],
    )

setup(
    name='dirsort',
    version='0.1.0',
    description='Move the files of a folder into subfolders by extension',
    py_modules=['sorter', 'dirsort', 'sorter_gui'],
    python_requires='>=3.8',
    install_requires=['PyQt5'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['dirsort=dirsort:main'],
        'gui_scripts': ['sorter-gui=sorter_gui:main'],
    },
    **extra
)
