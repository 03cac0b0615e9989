"""All magic values live here — no inline literals anywhere else."""

# Azure AI Vision — Image Analysis 4.0
IMAGE_ANALYSIS_PATH = "/computervision/imageanalysis:analyze"
IMAGE_ANALYSIS_API_VERSION = "2024-02-01"
IMAGE_ANALYSIS_FEATURES = ("caption", "denseCaptions", "objects", "tags", "people")
IMAGE_ANALYSIS_KEY_HEADER = "Ocp-Apim-Subscription-Key"
DEFAULT_IMAGE_FILE = "images/twisters.jpg"

# Custom Vision REST APIs
TRAINING_API_PATH = "/customvision/v3.3/training"
TRAINING_KEY_HEADER = "Training-Key"
PREDICTION_API_PATH = "/customvision/v3.0/Prediction"
PREDICTION_KEY_HEADER = "Prediction-Key"
OCTET_STREAM = "application/octet-stream"

# Training iteration statuses reported by Custom Vision
ITERATION_RUNNING_STATUSES = frozenset({"Queued", "Training"})
ITERATION_SUCCEEDED_STATUSES = frozenset({"Completed"})
ITERATION_FAILED_STATUSES = frozenset({"Failed"})

# Config defaults
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TRAINING_IMAGES_DIR = "more-training-images"
DEFAULT_TEST_IMAGES_DIR = "test-images"
DEFAULT_POLL_INTERVAL = "5"
DEFAULT_POLL_MAX_ATTEMPTS = "360"
DEFAULT_PREDICTION_THRESHOLD = "0.5"
DEFAULT_HTTP_TIMEOUT = "30"

# CLI commands
CMD_ANALYZE = "analyze"
CMD_TRAIN = "train"
CMD_PREDICT = "predict"
CMD_RUN = "run"

# Log / user-facing messages
MSG_ANALYZING = "\nAnalyzing %s\n"
MSG_CAPTION_HEADER = " Caption:"
MSG_CAPTION = '   "%s", Confidence %.2f\n'
MSG_DENSE_HEADER = " Dense Captions:"
MSG_DENSE_CAPTION = "   Caption: '%s', Confidence: %.2f"
MSG_TAGS_HEADER = "\n Tags:"
MSG_TAG = "   '%s', Confidence: %.2f"
MSG_OBJECTS_HEADER = "\n Objects:"
MSG_OBJECT = '   "%s"'
MSG_PEOPLE_HEADER = "\n People:"
MSG_PERSON = "   Bounding box %s, Confidence: %.2f"
MSG_UPLOADING = "Uploading images..."
MSG_TRAINING = "Training."
MSG_MODEL_TRAINED = "Model trained"
MSG_PREDICTION = "%s (%.1f%%)"
MSG_NO_TEST_IMAGES = "No test images found in %s"
MSG_MISSING_TAG_FOLDER = "No folder for tag %r under %s, skipping"
MSG_TRAINING_SUBMITTED = "Training iteration %s submitted (status %s)"
MSG_POLL_STATUS = "Iteration %s status: %s (attempt %d)"
MSG_JOB_FAILED = "Training failed: %s"
MSG_JOB_TIMEOUT = "Training did not finish: %s"
MSG_PROTOCOL_ERROR = "Unexpected response from service: %s"
MSG_REMOTE_ERROR = "Request failed: %s"
MSG_CONFIG_ERROR = "Configuration error: %s"
MSG_FILE_ERROR = "Cannot read file: %s"
