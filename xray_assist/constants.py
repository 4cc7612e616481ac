"""All magic values live here — no inline literals anywhere else."""

# Accepted uploads
ALLOWED_MEDIA_TYPES: tuple[str, ...] = ("image/png", "image/jpeg", "image/webp")
UPLOAD_EXTENSIONS: tuple[str, ...] = ("png", "jpg", "jpeg", "webp")

# Providers / models
PROVIDER_GEMINI = "gemini"
PROVIDER_CLAUDE = "claude"
PROVIDER_OPENAI = "openai"
DEFAULT_PROVIDER = PROVIDER_GEMINI
GEMINI_MODEL = "gemini-2.5-flash"
CLAUDE_VISION_MODEL = "claude-opus-4-6"
OPENAI_VISION_MODEL = "gpt-4o"
DEFAULT_MODELS = {
    PROVIDER_GEMINI: GEMINI_MODEL,
    PROVIDER_CLAUDE: CLAUDE_VISION_MODEL,
    PROVIDER_OPENAI: OPENAI_VISION_MODEL,
}
CLAUDE_MAX_TOKENS = 4096

# Instructional prompt sent with every image
PROMPT_VERSION = "2025-08-measure-v1"
PROMPT = """أنت مساعد ذكاء اصطناعي متطور لأطباء الأسنان، متخصص في التحليل الإشعاعي والقياسات الدقيقة. مهمتك هي تحليل صورة الأشعة السينية المقدمة وتقديم تقرير قياسات مفصل للمساعدة في اتخاذ القرارات السريرية.

بناءً على الصورة، يرجى تقديم تقرير مفصل يغطي الأقسام التالية:

1.  **تحليل قنوات الجذور (Endodontic Analysis):**
    *   حدد الأسنان التي قد تتطلب علاجًا لقناة الجذر.
    *   بالنسبة للسن الأكثر وضوحًا، قم بتقدير طول العمل لقناة (قنوات) الجذر بالمليمتر. اذكر أي انحناءات ملحوظة في القناة.

2.  **تقييم زراعة الأسنان (Implantology Assessment):**
    *   حدد المواقع عديمة الأسنان (Edentulous) المحتملة والمناسبة لزراعة الأسنان.
    *   لموقع محدد، قم بتقدير ارتفاع وعرض العظم المتاح بالمليمتر.
    *   اقترح حجمًا مناسبًا للزرعة (الطول والقطر) لهذا الموقع، مع مراعاة وجود هامش أمان من الهياكل التشريحية (مثل العصب السنخي السفلي، الجيب الفكي العلوي).

3.  **تقييم حالة العظم (Bone Assessment):**
    *   قدم تقييمًا عامًا لكثافة العظم السنخي وجودته (على سبيل المثال D1, D2, D3, D4 إذا كان يمكن تمييزه).
    *   قم بقياس سماكة العظم القشري (Cortical bone) في منطقة رئيسية إذا أمكن.

قم بتنظيم تقريرك بوضوح مع استخدام عناوين لكل قسم. استخدم المصطلحات المهنية.

**إخلاء مسؤولية حاسم:** ابدأ ردك دائمًا بـ: "إخلاء مسؤولية: هذه القياسات التي تم إنشاؤها بواسطة الذكاء الاصطناعي هي لأغراض التخطيط قبل الجراحة والأغراض التعليمية فقط. إنها ليست بديلاً عن الحكم السريري ويجب التحقق منها باستخدام تقنيات القياس التقليدية والفحص السريري. يتحمل المستخدم المسؤولية الكاملة عن أي قرارات سريرية يتم اتخاذها بناءً على هذا التحليل.\""""

# Environment
ENV_API_KEY = "API_KEY"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_PROVIDER = "ANALYSIS_PROVIDER"
ENV_MODEL = "ANALYSIS_MODEL"
ENV_TIMEOUT = "ANALYSIS_TIMEOUT"
DEFAULT_LOG_LEVEL = "INFO"

# Config errors
MSG_ERR_NO_API_KEY = "API_KEY environment variable not set"
MSG_ERR_BAD_PROVIDER = "ANALYSIS_PROVIDER must be one of gemini, claude, openai (got %r)"
MSG_ERR_BAD_TIMEOUT = "ANALYSIS_TIMEOUT must be a positive integer (got %r)"

# Log messages
MSG_APP_STARTING = "Starting X-ray measurement assistant (provider=%s, model=%s)"
MSG_FILE_ACCEPTED = "Accepted %s (%s)"
MSG_FILE_REJECTED = "Rejected %s: unsupported media type %s"
MSG_ANALYSIS_START = "→ %s analysis of %s (prompt %s)"
MSG_ANALYSIS_OK = "✓ Analysis done (%.1fs, %d chars)"
MSG_ANALYSIS_FAIL = "✗ Analysis failed (%.1fs): %s"
MSG_ANALYSIS_BUSY = "Analysis already in progress, ignoring request"
MSG_ANALYSIS_STALE = "Discarding result of a superseded analysis"
MSG_ANALYSIS_CANCELLED = "Analysis cancelled before it finished"
MSG_SERVICE_ERROR = "Error analyzing image with %s"

# Error details
MSG_SERVICE_TIMEOUT = "timeout after %ss"
MSG_EMPTY_RESPONSE = "empty response from model"
MSG_READ_FAILED = "could not read %s: %s"
MSG_PREVIEW_RELEASED = "preview of %s was released"

# User-facing text (Arabic, right-to-left)
MSG_UNSUPPORTED_TYPE = "نوع الملف غير مدعوم. الرجاء رفع صورة من نوع PNG, JPG, أو WEBP."
MSG_ANALYSIS_FAILED = "فشل التحليل: %s"
MSG_UNEXPECTED_ERROR = "حدث خطأ غير متوقع."
UI_PAGE_TITLE = "أداة قياس أشعة الأسنان"
UI_PAGE_ICON = "🦷"
UI_TITLE = "أداة قياس وتحليل أشعة الأسنان المتقدمة"
UI_SUBTITLE = "أداة احترافية لأطباء الأسنان لتحليل القياسات الدقيقة من صور الأشعة."
UI_UPLOAD_LABEL = "انقر للرفع أو اسحب وأفلت الصورة هنا"
UI_UPLOAD_HELP = "PNG, JPG or WEBP"
UI_PREVIEW_HEADER = "الصورة المرفوعة"
UI_PREVIEW_CAPTION = "معاينة الأشعة"
UI_RESULTS_HEADER = "نتائج التحليل"
UI_ANALYZE = "بدء التحليل"
UI_ANALYZING = "جاري التحليل..."
UI_RESET = "رفع صورة أخرى"
UI_LOADING = "جاري إجراء القياسات، الرجاء الانتظار..."
UI_PLACEHOLDER = "التقرير القياسي المفصل سيظهر هنا."
UI_DISCLAIMER = (
    "إخلاء مسؤولية: هذه الأداة تعمل بالذكاء الاصطناعي وتهدف لمساعدة أطباء الأسنان في التخطيط الأولي. "
    "القياسات والتحليلات المقدمة هي تقديرية ويجب التحقق منها إكلينيكيًا قبل اتخاذ أي قرار علاجي. "
    "الاستخدام يقع على مسؤولية الطبيب المعالج."
)
UI_RTL_STYLE = """
<style>
  .stApp { direction: rtl; text-align: right; }
  .xray-report { white-space: normal; text-align: right; line-height: 1.8; }
  .xray-disclaimer { font-size: 0.75rem; color: #6b7280; text-align: center; margin-top: 3rem; }
</style>
"""

# Streamlit session keys
STATE_SESSION = "xray_session"
STATE_UPLOADER = "xray_uploader_generation"

# Streamlit widget keys
WIDGET_ANALYZE = "xray_analyze"
WIDGET_ANALYZE_BUSY = "xray_analyze_busy"
WIDGET_UPLOAD = "xray_upload_%d"
