from __future__ import annotations

HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="vi">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Chuyển đổi TCVN3 ↔ Unicode</title>
    <style>
        :root {
            --primary-color: #5b6ee1;
            --primary-gradient: linear-gradient(100deg, #5b6ee1 0%, #38c6e5 100%);
            --background-color: #f7faff;
            --surface-color: #ffffff;
            --text-color: #232946;
            --text-color-light: #6b7280;
            --border-color: #e3e8f7;
            --border-radius: 18px;
        }

        body {
            font-family: 'Inter', 'Roboto', Arial, sans-serif;
            background: var(--background-color);
            color: var(--text-color);
            margin: 0;
            padding: 24px;
            display: flex;
            justify-content: center;
        }

        .container {
            max-width: 1100px;
            width: 100%;
            background: var(--surface-color);
            padding: 32px;
            border-radius: var(--border-radius);
            box-shadow: 0 8px 32px rgba(91, 110, 225, 0.10);
        }

        h1 { text-align: center; margin-top: 0; }

        .tab-container {
            display: flex;
            margin-bottom: 24px;
            background: #f0f4f8;
            border-radius: 12px;
            padding: 8px;
        }

        .tab-button {
            flex: 1;
            padding: 12px 20px;
            border: none;
            background: transparent;
            font-size: 1.05em;
            font-weight: 600;
            color: var(--text-color-light);
            cursor: pointer;
            border-radius: 10px;
        }

        .tab-button.active { background: var(--primary-gradient); color: #fff; }

        .tab-content { display: none; }
        .tab-content.active { display: block; }

        .main-content { display: flex; gap: 24px; align-items: flex-start; }
        .screens { flex: 2; }
        .history-section { flex: 1; }

        .input-pair { display: flex; gap: 16px; margin-bottom: 24px; }
        .input-group { flex: 1; display: flex; flex-direction: column; gap: 8px; }

        textarea, input[type=text], select {
            width: 100%;
            box-sizing: border-box;
            padding: 12px;
            font-size: 16px;
            border-radius: 12px;
            border: 1.5px solid var(--border-color);
            background: #fafdff;
        }

        textarea { min-height: 110px; resize: vertical; }

        .translate-btn {
            align-self: flex-start;
            padding: 10px 22px;
            border: none;
            border-radius: 10px;
            background: var(--primary-gradient);
            color: #fff;
            font-weight: 600;
            cursor: pointer;
        }

        .translate-btn:disabled { opacity: 0.5; cursor: not-allowed; }

        .history-list { display: flex; flex-direction: column; gap: 12px; }
        .history-item { border: 1px solid var(--border-color); border-radius: 12px; padding: 12px; }
        .history-header { display: flex; justify-content: space-between; font-weight: 600; }
        .history-time { color: var(--text-color-light); font-weight: 400; }
        .history-empty { color: var(--text-color-light); }
        .hex-output { font-family: monospace; word-break: break-all; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Chuyển đổi TCVN3 ↔ Unicode</h1>
        <div class="tab-container">
            <button class="tab-button active" data-tab="converter-tab">Chuyển mã</button>
            <button class="tab-button" data-tab="translator-tab">Dịch Trung ↔ Việt</button>
            <button class="tab-button" data-tab="transcode-tab">GBK / Windows-1252</button>
        </div>

        <div class="main-content">
            <div class="screens">
                <div id="converter-tab" class="tab-content active">
                    <h2>TCVN3 → Unicode</h2>
                    <div class="input-pair">
                        <div class="input-group">
                            <label>TCVN3</label>
                            <textarea id="tcvn3_input" placeholder="Nhập văn bản TCVN3..."></textarea>
                            <button class="translate-btn" id="submit-tcvn3" disabled>Dịch</button>
                        </div>
                        <div class="input-group">
                            <label>Unicode</label>
                            <textarea id="unicode_output" placeholder="Kết quả Unicode sẽ hiển thị ở đây..."></textarea>
                        </div>
                    </div>
                    <h2>Unicode → TCVN3</h2>
                    <div class="input-pair">
                        <div class="input-group">
                            <label>Unicode</label>
                            <textarea id="unicode_input" placeholder="Nhập văn bản Unicode..."></textarea>
                            <button class="translate-btn" id="submit-unicode" disabled>Dịch</button>
                        </div>
                        <div class="input-group">
                            <label>TCVN3</label>
                            <textarea id="tcvn3_output" placeholder="Kết quả TCVN3 sẽ hiển thị ở đây..."></textarea>
                        </div>
                    </div>
                </div>

                <div id="translator-tab" class="tab-content">
                    <div class="input-group">
                        <label>Tiếng Trung</label>
                        <textarea id="chinese" placeholder="Nhập văn bản tiếng Trung..."></textarea>
                        <button class="translate-btn" id="translate-zh-vi">Trung → Việt</button>
                    </div>
                    <div class="input-pair">
                        <div class="input-group">
                            <label>Tiếng Việt (Unicode)</label>
                            <textarea id="unicode" placeholder="Văn bản Unicode..."></textarea>
                        </div>
                        <div class="input-group">
                            <label>Tiếng Việt (TCVN3)</label>
                            <textarea id="tcvn3" placeholder="Văn bản TCVN3..."></textarea>
                        </div>
                    </div>
                    <button class="translate-btn" id="translate-vi-zh">Việt → Trung</button>
                </div>

                <div id="transcode-tab" class="tab-content">
                    <div class="input-group">
                        <label>Văn bản</label>
                        <textarea id="transcode-text"></textarea>
                    </div>
                    <div class="input-pair">
                        <div class="input-group">
                            <label>Mã nguồn</label>
                            <select id="transcode-source">
                                <option value="utf8">UTF-8</option>
                                <option value="gbk">GBK</option>
                                <option value="windows-1252">Windows-1252</option>
                            </select>
                        </div>
                        <div class="input-group">
                            <label>Mã đích</label>
                            <select id="transcode-target">
                                <option value="utf8">UTF-8</option>
                                <option value="gbk">GBK</option>
                                <option value="windows-1252">Windows-1252</option>
                            </select>
                        </div>
                    </div>
                    <button class="translate-btn" id="transcode-run">Chuyển mã</button>
                    <p class="hex-output" id="transcode-hex"></p>
                    <p id="transcode-result"></p>
                </div>
            </div>

            <div class="history-section">
                <h2>Lịch sử dịch</h2>
                <div id="history"></div>
            </div>
        </div>
    </div>

    <script>
        const fields = {
            converter: ['tcvn3_input', 'unicode_output', 'unicode_input', 'tcvn3_output'],
            translator: ['chinese', 'unicode', 'tcvn3'],
        };

        async function post(url, body) {
            const res = await fetch(url, {
                method: 'POST',
                headers: { 'Content-Type': 'application/json' },
                body: JSON.stringify(body),
            });
            return res.json();
        }

        function setValue(id, value) {
            const el = document.getElementById(id);
            if (el !== document.activeElement && el.value !== value) {
                el.value = value;
            }
        }

        function escapeHtml(value) {
            const div = document.createElement('div');
            div.textContent = value;
            return div.innerHTML;
        }

        function renderHistory(items) {
            const container = document.getElementById('history');
            if (!items.length) {
                container.innerHTML = '<div class="history-empty"><p>Chưa có lịch sử dịch</p></div>';
                return;
            }
            container.innerHTML = '<div class="history-list">' + items.map(item => `
                <div class="history-item">
                    <div class="history-header">
                        <span class="history-type">${escapeHtml(item.label)}</span>
                        <span class="history-time">${escapeHtml(item.timestamp)}</span>
                    </div>
                    <div><strong>Input:</strong> ${escapeHtml(item.input)}</div>
                    <div><strong>Output:</strong> ${escapeHtml(item.output)}</div>
                </div>`).join('') + '</div>';
        }

        function render(state) {
            if (!state || !state.converter) {
                return;
            }
            fields.converter.forEach(id => setValue(id, state.converter[id]));
            fields.translator.forEach(id => setValue(id, state.translator[id]));
            document.getElementById('submit-tcvn3').disabled = !state.converter.can_submit_tcvn3;
            document.getElementById('submit-unicode').disabled = !state.converter.can_submit_unicode;
            const busy = state.translator.is_translating;
            document.getElementById('translate-zh-vi').disabled = busy;
            document.getElementById('translate-vi-zh').disabled = busy;
            renderHistory(state.history);
        }

        fields.converter.forEach(id => {
            document.getElementById(id).addEventListener('input', async (e) => {
                render(await post('/api/converter/edit', { field: id, text: e.target.value }));
            });
        });

        fields.translator.forEach(id => {
            const el = document.getElementById(id);
            el.addEventListener('input', async (e) => {
                render(await post('/api/translator/edit', { field: id, text: e.target.value }));
            });
            el.addEventListener('blur', async () => {
                render(await (await fetch('/api/state')).json());
            });
        });

        async function submit(panel) {
            render(await post('/api/converter/submit', { panel }));
        }

        [['tcvn3_input', 'tcvn3'], ['unicode_input', 'unicode']].forEach(([id, panel]) => {
            document.getElementById(id).addEventListener('keydown', async (e) => {
                if (e.key === 'Enter' && !e.shiftKey) {
                    e.preventDefault();
                    await submit(panel);
                }
            });
        });
        document.getElementById('submit-tcvn3').onclick = () => submit('tcvn3');
        document.getElementById('submit-unicode').onclick = () => submit('unicode');

        async function translate(direction) {
            document.getElementById('translate-zh-vi').disabled = true;
            document.getElementById('translate-vi-zh').disabled = true;
            render(await post('/api/translator/translate', { direction }));
        }

        document.getElementById('translate-zh-vi').onclick = () => translate('zh-vi');
        document.getElementById('translate-vi-zh').onclick = () => translate('vi-zh');

        document.getElementById('transcode-run').onclick = async () => {
            const result = await post('/api/transcode', {
                text: document.getElementById('transcode-text').value,
                source: document.getElementById('transcode-source').value,
                target: document.getElementById('transcode-target').value,
            });
            document.getElementById('transcode-hex').textContent = result.hex || '';
            document.getElementById('transcode-result').textContent = result.text || '';
        };

        document.querySelectorAll('.tab-button').forEach(button => {
            button.addEventListener('click', () => {
                document.querySelectorAll('.tab-button').forEach(b => b.classList.remove('active'));
                document.querySelectorAll('.tab-content').forEach(c => c.classList.remove('active'));
                button.classList.add('active');
                document.getElementById(button.dataset.tab).classList.add('active');
            });
        });

        fetch('/api/state').then(res => res.json()).then(render);
    </script>
</body>
</html>
"""
