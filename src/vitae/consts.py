"""Constants for Vitae"""

# ==================== File Paths ====================
CONFIG_PATH_DEFAULT = "config.toml"
LOG_FILE_DEFAULT = "data/vitae.log"

# ==================== Remote Service ====================
API_BASE_URL_DEFAULT = "https://api.danielleitelima.com"
API_PATH_RESUME = "getResume"
API_PATH_CODE_SAMPLES = "getCodeSamples"
API_PATH_RUN_CODE_SAMPLE = "runCodeSample"

# ==================== Timeouts (seconds) ====================
TIMEOUT_HTTP_REQUEST = 30

# ==================== Template Names ====================
TEMPLATE_RESUME = "resume.md.j2"
TEMPLATE_FORM = "form.md.j2"
TEMPLATE_RUN_RESULT = "run_result.md.j2"

# ==================== Language Levels ====================
LANGUAGE_LEVELS = {
    1: "Beginner",
    2: "Intermediate",
    3: "Advanced",
}
LANGUAGE_LEVEL_FLUENT = "Fluent"
