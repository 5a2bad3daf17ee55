"""Browser client served at ``/``.

The page polls ``/sync`` on a fixed interval and overwrites its display with
whatever the server holds. Local edits are shown immediately and pushed with
only the changed field.
"""

# Raw string so Python leaves the \n escapes in the JavaScript alone
HTML_TEMPLATE = r"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Clipshare</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 20px; background: #f4f4f4; }
        h1 { text-align: center; }
        .section {
            max-width: 600px;
            margin: 0 auto;
            padding: 20px;
            background: #fff;
            border: 1px solid #ccc;
            border-radius: 8px;
            box-shadow: 0 2px 6px rgba(0,0,0,0.08);
        }
        textarea { width: 100%; height: 200px; font-size: 16px; padding: 10px; box-sizing: border-box; }
        button { font-size: 16px; padding: 6px 14px; margin-top: 10px; cursor: pointer; border-radius: 5px; border: 1px solid #aaa; background: #eee; }
        button:hover { background: #ddd; }
        button:disabled { opacity: 0.5; cursor: default; }
        #image_preview { max-width: 100%; margin-top: 10px; border: 1px solid #eee; border-radius: 5px; }
        #image_empty { color: #888; margin-top: 10px; }
        #file_input { display: none; }
        #paste_fallback { position: fixed; left: -9999px; opacity: 0; }
        .hidden { display: none; }
        #toast {
            position: fixed;
            bottom: 20px;
            right: 20px;
            padding: 10px 16px;
            border-radius: 6px;
            color: #fff;
            opacity: 0;
            transition: opacity 0.25s;
        }
        #toast.show { opacity: 1; }
        #toast.success { background: #34a853; }
        #toast.error { background: #d93025; }
    </style>
</head>
<body>
    <h1>Clipshare</h1>
    <div class="section">
        <button id="toggle_mode">Switch to image upload mode</button>

        <div id="paste_mode">
            <textarea id="text_area" placeholder="Type or paste text..."></textarea><br>
            <button id="paste_btn">📋 Paste from Clipboard</button>
            <button id="copy_btn">📄 Copy to Local Clipboard</button>
            <input type="text" id="paste_fallback" aria-hidden="true" tabindex="-1">
        </div>

        <div id="image_mode" class="hidden">
            <button id="upload_btn">🖼️ Upload Image</button>
            <input type="file" id="file_input" accept="image/*">
            <button id="copy_image_btn" disabled>📄 Copy Image</button>
            <button id="download_btn" disabled>⬇️ Download</button>
            <div id="image_empty">No image shared yet.</div>
            <img id="image_preview" class="hidden" alt="Shared image">
        </div>
    </div>
    <div id="toast"></div>

    <script>
    const POLL_INTERVAL_MS = {{ poll_interval_ms }};
    const MAX_IMAGE_BYTES = {{ max_image_bytes }};

    const textArea     = document.getElementById('text_area');
    const imagePreview = document.getElementById('image_preview');
    const imageEmpty   = document.getElementById('image_empty');
    const toastBox     = document.getElementById('toast');

    let inputMode = 'paste';
    let image = null;
    let active = true;
    let toastTimer = null;

    function toast(msg, kind) {
        toastBox.innerText = msg;
        toastBox.className = 'show ' + kind;
        clearTimeout(toastTimer);
        toastTimer = setTimeout(() => { toastBox.className = ''; }, 2500);
    }

    function render(data) {
        textArea.value = data.text || '';
        image = data.image || null;
        imagePreview.src = image || '';
        imagePreview.classList.toggle('hidden', !image);
        imageEmpty.classList.toggle('hidden', !!image);
        document.getElementById('copy_image_btn').disabled = !image;
        document.getElementById('download_btn').disabled = !image;
    }

    // ===== Polling =====
    async function fetchData() {
        try {
            const res = await fetch('/sync');
            if (!res.ok) {
                console.error('Fetch error:', res.status);
                return;
            }
            const data = await res.json();
            if (!active) return;             // page torn down while in flight
            render(data);
        } catch (err) {
            console.error('Fetch error:', err);
        }
    }

    async function updateData(data) {
        try {
            const res = await fetch('/sync', {
                method: 'POST',
                headers: { 'Content-Type': 'application/json' },
                body: JSON.stringify(data)
            });
            if (!res.ok) throw new Error(res.status);
            if (active) toast('Updated successfully', 'success');
            return true;
        } catch (err) {
            console.error('Update error:', err);
            if (active) toast('Failed to save', 'error');
            return false;
        }
    }

    fetchData();
    const interval = setInterval(fetchData, POLL_INTERVAL_MS);
    window.addEventListener('pagehide', () => {
        active = false;
        clearInterval(interval);
    });

    // ===== Text =====
    let typingTimer = null;
    textArea.addEventListener('input', () => {
        clearTimeout(typingTimer);
        typingTimer = setTimeout(() => updateData({ text: textArea.value }), 400);
    });

    // Without the async clipboard API (e.g. plain-HTTP origins), paste into a hidden input
    const pasteFallback = document.getElementById('paste_fallback');

    document.getElementById('paste_btn').addEventListener('click', async () => {
        try {
            if (navigator.clipboard && navigator.clipboard.readText) {
                const text = await navigator.clipboard.readText();
                if (text) {
                    textArea.value = text;
                    if (await updateData({ text: text })) {
                        toast('Text pasted successfully', 'success');
                    }
                }
                return;
            }
            pasteFallback.focus();
            setTimeout(() => document.execCommand('paste'), 100);
        } catch (err) {
            console.error('Clipboard read failed:', err);
            toast('Failed to paste from clipboard', 'error');
        }
    });

    pasteFallback.addEventListener('paste', e => {
        e.preventDefault();
        const text = e.clipboardData.getData('text');
        pasteFallback.blur();
        if (!text) return;
        textArea.value = text;
        updateData({ text: text });
    });

    document.getElementById('copy_btn').addEventListener('click', () => {
        const text = textArea.value;
        if (navigator.clipboard && navigator.clipboard.writeText) {
            navigator.clipboard.writeText(text)
                .then(() => toast('Text copied to clipboard', 'success'))
                .catch(err => {
                    console.error('Clipboard API failed:', err);
                    fallbackCopy(text);
                });
        } else {
            fallbackCopy(text);
        }
    });

    // Fallback copy method using temporary textarea
    function fallbackCopy(text) {
        const ta = document.createElement('textarea');
        ta.value = text;
        ta.style.position = 'fixed';
        ta.style.opacity = '0';
        document.body.appendChild(ta);
        ta.select();
        try {
            if (document.execCommand('copy')) {
                toast('Text copied to clipboard', 'success');
            } else {
                toast('Failed to copy text', 'error');
            }
        } catch (err) {
            console.error('Fallback copy failed:', err);
            toast('Failed to copy text', 'error');
        }
        document.body.removeChild(ta);
    }

    // ===== Image =====
    const fileInput = document.getElementById('file_input');
    document.getElementById('upload_btn').addEventListener('click', () => fileInput.click());

    fileInput.addEventListener('change', () => {
        const file = fileInput.files[0];
        if (!file) return;
        if (file.size > MAX_IMAGE_BYTES) {
            toast('Image must be less than {{ max_image_label }}', 'error');
            fileInput.value = '';
            return;
        }
        const reader = new FileReader();
        reader.onload = ev => {
            const dataUri = ev.target.result;
            render({ text: textArea.value, image: dataUri });
            updateData({ image: dataUri });
        };
        reader.readAsDataURL(file);
        fileInput.value = '';
    });

    document.getElementById('copy_image_btn').addEventListener('click', async () => {
        if (!image) return;
        try {
            const blob = await (await fetch(image)).blob();
            await navigator.clipboard.write([new ClipboardItem({ [blob.type]: blob })]);
            toast('Image copied to clipboard', 'success');
        } catch (err) {
            console.error('Image copy failed:', err);
            toast('Failed to copy image', 'error');
        }
    });

    document.getElementById('download_btn').addEventListener('click', () => {
        if (!image) return;
        try {
            const ext = (image.match(/^data:image\/(\w+)/) || [null, 'png'])[1];
            const a = document.createElement('a');
            a.href = image;
            a.download = 'shared-image.' + ext;
            document.body.appendChild(a);
            a.click();
            document.body.removeChild(a);
            toast('Image download started', 'success');
        } catch (err) {
            toast('Failed to download image', 'error');
        }
    });

    // ===== Mode toggle (local only) =====
    document.getElementById('toggle_mode').addEventListener('click', () => {
        inputMode = inputMode === 'paste' ? 'image' : 'paste';
        document.getElementById('paste_mode').classList.toggle('hidden', inputMode !== 'paste');
        document.getElementById('image_mode').classList.toggle('hidden', inputMode !== 'image');
        document.getElementById('toggle_mode').innerText =
            'Switch to ' + (inputMode === 'paste' ? 'image upload' : 'text paste') + ' mode';
    });
    </script>
</body>
</html>
"""
