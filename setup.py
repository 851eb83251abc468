from setuptools import setup, find_packages

setup(
    name = 'turtlehost',
    version = '0.1.0',
    author = 'Uwe Jugel',
    description = ('LOGO turtle graphics engine drawing on pluggable raster surfaces'),
    license = 'AGPLv3+',
    keywords = "turtle logo graphics terminal braille drawing canvas console repl",
    scripts = [],
    packages = find_packages(
        exclude = ['contrib', 'docs', 'tests'],
    ),
    python_requires = '>=3.7',
    install_requires = [
        'pygments',
        'prompt-toolkit>=3.0.0',
        'lark>=1.0.0',
    ],
    extras_require = {
        'test': ['pytest'],
    },
    entry_points={
        "console_scripts": [
            "turtlehost=turtlehost:main",
        ]
    },
    classifiers = [
        "Development Status :: 4 - Beta",
        "Topic :: Utilities",
        'Environment :: Console',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
