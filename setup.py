from setuptools import setup, find_namespace_packages

# Read the contents of your requirements.txt file
with open('requirements.txt') as f:
    required = f.read().splitlines()

# Read the long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='stl_to_mitl',
    version='0.1.0',
    packages=find_namespace_packages(include=['stl_to_mitl', 'stl_to_mitl.*']),
    install_requires=required,  # Use the list from requirements.txt
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'stl_to_mitl=stl_to_mitl.scripts.stl_to_mitl:main',
        ],
    },
    description='STL to MITL conversion with stable partitioning of temporal operators',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='GNU GPLv3',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.7',
    include_package_data=True,
)
