#!/usr/bin/env python3
"""
Flask web front end for the Offline Study Aid
Serves the dashboard and runs summary / highlight / Q&A actions on pasted text

Design: thin presentation layer
- All analysis happens in nlp.py, synchronously, per request
- No job store, no queue, nothing persisted between requests
- Export endpoints stream PDF / CSV straight back to the browser
"""

import io
import os
from datetime import datetime

from flask import Flask, jsonify, render_template_string, request, send_file

from exporters import ExportError, deck_csv, to_plain_text, write_pdf
from nlp import ACTIONS, EMPTY_INPUT_MESSAGE, run_action
from nlp_pipeline import QUESTION_STYLES, SHORT_ANSWER, QuestionGenerator

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = int(os.environ.get('STUDY_AID_MAX_CONTENT_LENGTH', str(1024 * 1024)))

HOST = os.environ.get('STUDY_AID_HOST', '0.0.0.0')
PORT = int(os.environ.get('STUDY_AID_PORT', '5000'))


DASHBOARD_TEMPLATE = """
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Offline Study Aid</title>
  <style>
    body { font-family: system-ui, -apple-system, BlinkMacSystemFont, Arial, sans-serif; margin: 0; padding: 0; background: #f6f8fb; color: #111; }
    header { background: #1f2933; color: #fff; padding: 1.5rem 1rem; }
    header h1 { margin: 0; font-size: 1.6rem; }
    main { max-width: 960px; margin: 0 auto; padding: 1.5rem; }
    .card { background: #fff; border-radius: 8px; box-shadow: 0 2px 8px rgba(0,0,0,0.05); padding: 1.5rem; margin-bottom: 1.5rem; }
    label { display: block; font-weight: 600; margin-bottom: 0.4rem; }
    textarea, select { width: 100%; padding: 0.55rem; border: 1px solid #cbd5e0; border-radius: 6px; font-size: 0.95rem; }
    textarea { min-height: 12rem; resize: vertical; }
    .actions { display: flex; gap: 0.6rem; flex-wrap: wrap; margin-top: 1rem; }
    button { background: #2563eb; color: #fff; border: none; border-radius: 6px; padding: 0.6rem 1.2rem; font-size: 1rem; cursor: pointer; }
    button.secondary { background: #475569; }
    button:disabled { opacity: 0.6; cursor: not-allowed; }
    .muted { color: #64748b; font-size: 0.9rem; }
    .error { color: #ef4444; }
    mark { background: #fef08a; padding: 0 0.1rem; }
    .loader { display: inline-block; width: 1rem; height: 1rem; border: 2px solid #cbd5e0; border-top-color: #2563eb; border-radius: 50%; animation: spin 0.8s linear infinite; vertical-align: middle; }
    @keyframes spin { to { transform: rotate(360deg); } }
    #resultContainer { display: none; }
  </style>
</head>
<body>
  <header>
    <h1>Offline Study Aid</h1>
    <p class="muted">Summaries, keyword highlights and practice questions. Nothing leaves this server.</p>
  </header>
  <main>
    <section class="card">
      <label for="inputText">Study text</label>
      <textarea id="inputText" placeholder="Paste your notes here..."></textarea>
      <label for="qaType" class="muted" style="margin-top: 0.8rem;">Question style</label>
      <select id="qaType">
        {% for style in styles %}
          <option value="{{ style }}"{% if style == default_style %} selected{% endif %}>{{ style|title }}</option>
        {% endfor %}
      </select>
      <div class="actions">
        <button id="summaryBtn" type="button">Summary</button>
        <button id="highlightBtn" type="button">Highlight</button>
        <button id="qaBtn" type="button">Q&amp;A</button>
      </div>
    </section>

    <section class="card" id="resultContainer">
      <h2>Result</h2>
      <div id="output"></div>
      <div class="actions">
        <button id="copyBtn" class="secondary" type="button">Copy</button>
        <button id="pdfBtn" class="secondary" type="button">Download PDF</button>
        <button id="deckBtn" class="secondary" type="button">Download Anki Deck</button>
      </div>
    </section>
  </main>

  <script>
    const inputText = document.getElementById('inputText');
    const outputDiv = document.getElementById('output');
    const resultContainer = document.getElementById('resultContainer');
    const copyBtn = document.getElementById('copyBtn');

    function showLoader() {
      resultContainer.style.display = 'block';
      outputDiv.innerHTML = '<div class="loader"></div> Processing...';
    }

    function showResult(html, isError = false) {
      resultContainer.style.display = 'block';
      outputDiv.innerHTML = isError ? `<span class="error">${html}</span>` : html;
    }

    async function handleAction(action) {
      const text = inputText.value.trim();
      if (!text) {
        showResult('{{ empty_message }}', true);
        return;
      }
      showLoader();
      try {
        const res = await fetch(`/analyze/${action}`, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ text, style: document.getElementById('qaType').value }),
        });
        const data = await res.json();
        if (!res.ok) {
          showResult(data.error || 'Request failed', true);
        } else {
          showResult(data.html);
        }
      } catch (err) {
        showResult('Error processing text: ' + err.message, true);
      }
    }

    async function download(url, body, filename) {
      const res = await fetch(url, {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify(body),
      });
      if (!res.ok) {
        const data = await res.json();
        alert(data.error || 'Download failed');
        return;
      }
      const href = URL.createObjectURL(await res.blob());
      const link = document.createElement('a');
      link.href = href;
      link.download = filename;
      link.click();
      URL.revokeObjectURL(href);
    }

    function downloadPDF() {
      const content = outputDiv.innerText;
      if (!content) {
        alert('No content to download!');
        return;
      }
      download('/export/pdf', { content }, 'study-notes.pdf');
    }

    function downloadDeck() {
      const text = inputText.value.trim();
      if (!text) {
        showResult('{{ empty_message }}', true);
        return;
      }
      download('/export/deck', { text, style: document.getElementById('qaType').value }, 'study-deck.csv');
    }

    async function copyToClipboard() {
      const text = outputDiv.innerText;
      try {
        await navigator.clipboard.writeText(text);
        const originalText = copyBtn.innerText;
        copyBtn.innerText = 'Copied!';
        setTimeout(() => copyBtn.innerText = originalText, 2000);
      } catch (err) {
        console.error('Failed to copy', err);
      }
    }

    document.getElementById('summaryBtn').addEventListener('click', () => handleAction('summary'));
    document.getElementById('highlightBtn').addEventListener('click', () => handleAction('highlight'));
    document.getElementById('qaBtn').addEventListener('click', () => handleAction('qa'));
    document.getElementById('pdfBtn').addEventListener('click', downloadPDF);
    document.getElementById('deckBtn').addEventListener('click', downloadDeck);
    copyBtn.addEventListener('click', copyToClipboard);
  </script>
</body>
</html>
"""


def request_payload():
    """JSON body or form fields, whichever the client sent"""
    return request.get_json(silent=True) or request.form


@app.route('/', methods=['GET'])
def index():
    """Dashboard for pasting text and running actions."""
    return render_template_string(
        DASHBOARD_TEMPLATE,
        styles=QUESTION_STYLES,
        default_style=SHORT_ANSWER,
        empty_message=EMPTY_INPUT_MESSAGE,
    )


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({'status': 'healthy', 'timestamp': datetime.utcnow().isoformat()})


@app.route('/analyze/<action>', methods=['POST'])
def analyze(action):
    """
    Run summary, highlight or qa on the submitted text
    Returns: {action, html} or {error}
    """
    if action not in ACTIONS:
        return jsonify({'error': f"Unknown action: {action}"}), 404

    payload = request_payload()
    text = (payload.get('text') or '').strip()
    if not text:
        return jsonify({'error': EMPTY_INPUT_MESSAGE}), 400

    style = payload.get('style') or SHORT_ANSWER
    print(f"Processing {action} ({len(text):,} characters)", flush=True)

    try:
        result = run_action(action, text, style)
    except Exception as e:
        print(f"Error processing {action}: {e}", flush=True)
        return jsonify({'error': f"Error processing text: {e}"}), 500

    return jsonify({'action': action, 'html': result})


@app.route('/export/pdf', methods=['POST'])
def export_pdf():
    """
    Convert rendered output (HTML or plain text) to a downloadable PDF
    """
    content = request_payload().get('content') or ''
    try:
        data = write_pdf(to_plain_text(content))
    except ExportError as e:
        return jsonify({'error': str(e)}), 400

    return send_file(
        io.BytesIO(data),
        mimetype='application/pdf',
        as_attachment=True,
        download_name='study-notes.pdf'
    )


@app.route('/export/deck', methods=['POST'])
def export_deck():
    """
    Download generated questions as an Anki CSV deck
    """
    payload = request_payload()
    text = (payload.get('text') or '').strip()
    if not text:
        return jsonify({'error': EMPTY_INPUT_MESSAGE}), 400

    cards = QuestionGenerator.build_cards(text, payload.get('style') or SHORT_ANSWER)
    try:
        content = deck_csv(cards)
    except ExportError as e:
        return jsonify({'error': str(e)}), 400

    return send_file(
        io.BytesIO(content.encode('utf-8')),
        mimetype='text/csv',
        as_attachment=True,
        download_name='study-deck.csv'
    )


if __name__ == '__main__':
    print("Study aid starting with configuration:", flush=True)
    print(f"  HOST: {HOST}", flush=True)
    print(f"  PORT: {PORT}", flush=True)
    print(f"  MAX_CONTENT_LENGTH: {app.config['MAX_CONTENT_LENGTH']}", flush=True)
    app.run(host=HOST, port=PORT, debug=False)
