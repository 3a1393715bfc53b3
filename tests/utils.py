"""Sample data shared by the test-suite."""

SAMPLE_METADATA = (
    "---- ExifTool ----\n"
    "FileName                        : IMG_9876.JPG\n"
    "CreateDate                      : 2023:09:08 18:56:54\n"
    "Model                           : iPhone 14\n"
    "\n"
)

SAMPLE_PATTERN = "{y}{m}{D}_{t}_{T2}_{r}.{e}"
SAMPLE_FILENAME = "230908_185654_iPhone 14_9876.JPG"
