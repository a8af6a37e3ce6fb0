from setuptools import setup, find_packages
import os

here = os.path.abspath(os.path.dirname(__file__))
README = open(os.path.join(here, 'README.md')).read()

version = '0.0.1'

install_requires = [
    # walkers and visitors over the instruction database
    'mdis>=0.3',
]

test_requires = [
    'pytest',
]

setup(
    name='shinsns',
    version=version,
    description="Renesas SH instruction set summary annotation pipeline",
    long_description=README + '\n\n',
    long_description_content_type='text/markdown',
    classifiers=[
        "Topic :: Software Development",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    keywords='superh renesas instruction set summary',
    license='LGPLv3+',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    package_data={'shinsns': ['isatables/*.json']},
    include_package_data=True,
    zip_safe=False,
    install_requires=install_requires,
    extras_require={
        'test': test_requires,
    },
    entry_points={
        'console_scripts': [
            'shinsns-db=shinsns.insndb.db:main',
        ]
    }
)
