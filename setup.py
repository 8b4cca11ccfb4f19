from setuptools import setup, find_packages

setup(
    name="dnnclassify",
    version="0.1.0",
    description="Single-image classification with pre-trained Caffe models via OpenCV DNN",
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=[
        "numpy",
        "opencv-python>=4.5,<5",  # 5.x dropped the Caffe importer
        "PyYAML",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["dnnclassify=dnnclassify.cli:main"]},
    python_requires=">=3.9",
)
