"""
Setup script for Workout Map.
Install: pip install -e .[test]
macOS bundle: python setup.py py2app (requires py2app)
"""

from setuptools import setup

APP = ['app.py']
DATA_FILES = []
OPTIONS = {
    'argv_emulation': True,
    'packages': ['nicegui', 'pandas'],
    'strip': True,
    'compressed': True,
}

setup(
    name='workout-map',
    version='1.0.0',
    description='Log running and cycling workouts by clicking on a map.',
    python_requires='>=3.9',
    py_modules=['app', 'constants', 'state', 'validation', 'workouts'],
    packages=['core', 'components'],
    install_requires=[
        'nicegui>=1.4',
        'pandas',
        'pywebview',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['workout-map=app:main'],
    },
    app=APP,
    data_files=DATA_FILES,
    options={'py2app': OPTIONS},
)
